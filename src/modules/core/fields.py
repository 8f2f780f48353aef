"""Serializer fields shared by the form-driven back-office endpoints."""

from rest_framework import serializers
from rest_framework.fields import empty


class FormBooleanField(serializers.BooleanField):
    """Boolean that stays unset when omitted from form or multipart input.

    DRF's ``BooleanField`` reads a missing HTML form key as ``False``.
    """

    default_empty_html = empty

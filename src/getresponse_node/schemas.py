"""Serializers validating GetResponse API payloads."""

from rest_framework import serializers


class CampaignSerializer(serializers.Serializer):
    """A campaign (contact list) as returned by `GET /campaigns`."""

    campaignId = serializers.CharField()  # noqa: N815
    name = serializers.CharField()


class TagSerializer(serializers.Serializer):
    """A tag as returned by `GET /tags`."""

    tagId = serializers.CharField()  # noqa: N815
    name = serializers.CharField()


class CustomFieldSerializer(serializers.Serializer):
    """A custom field definition as returned by `GET /custom-fields`."""

    customFieldId = serializers.CharField()  # noqa: N815
    name = serializers.CharField()


def validate_many(serializer_class, payload) -> list[dict]:
    """Validate a list payload with the given serializer."""
    serializer = serializer_class(data=payload, many=True)
    serializer.is_valid(raise_exception=True)
    return [dict(item) for item in serializer.validated_data]


def validate_page(payload) -> list[dict]:
    """Check a listing page is a list of objects, objects are kept as received."""
    return serializers.ListField(child=serializers.DictField()).run_validation(payload)

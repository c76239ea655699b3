"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for ValidatedEvent domain model."""

    titulo = serializers.CharField()
    cat = serializers.CharField()
    data = serializers.DateField()
    hora = serializers.CharField()
    local = serializers.CharField()
    preco = serializers.FloatField(source="preco.amount")
    img = serializers.URLField()
    desc = serializers.CharField()


class FieldErrorSerializer(serializers.Serializer):
    """Serializer for FieldError."""

    path = serializers.CharField()
    message = serializers.CharField()

"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class TicketSummarySerializer(serializers.Serializer):
    """Serializer for the TicketSummary projection."""

    title = serializers.CharField()
    status = serializers.CharField()
    participantsCount = serializers.IntegerField(source="participants_count")
    anonymityPercentage = serializers.CharField(source="anonymity_percentage")
    date = serializers.CharField()
    time = serializers.CharField()
    timezone = serializers.CharField()
    location = serializers.CharField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    imageUrl = serializers.CharField(source="image_url")


class TicketPageSerializer(serializers.Serializer):
    """Serializer for a paginated TicketPage envelope."""

    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    tickets = TicketSummarySerializer(many=True)


class TrendingTicketsSerializer(serializers.Serializer):
    """Serializer for the TrendingTickets envelope."""

    count = serializers.IntegerField()
    tickets = TicketSummarySerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Serializer for DomainError response bodies."""

    error = serializers.CharField(source="code.value")
    message = serializers.CharField()

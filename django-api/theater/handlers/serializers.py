"""Serializers for invoice input and statement/play output."""

from rest_framework import serializers

from theater.domain import Invoice, Performance


class PerformanceSerializer(serializers.Serializer):
    """Input shape of one performance."""

    playID = serializers.CharField(max_length=100)
    audience = serializers.IntegerField(min_value=0)


class InvoiceSerializer(serializers.Serializer):
    """Input shape of an invoice; builds the domain Invoice."""

    customer = serializers.CharField(max_length=255)
    performances = PerformanceSerializer(many=True, allow_empty=True)

    def to_invoice(self) -> Invoice:
        data = self.validated_data
        return Invoice(
            customer=data["customer"],
            performances=tuple(
                Performance.create(item["playID"], item["audience"])
                for item in data["performances"]
            ),
        )


class StatementLineSerializer(serializers.Serializer):
    """Serializer for StatementLine domain model."""

    play = serializers.CharField(source="play_name")
    amount = serializers.CharField()
    audience = serializers.IntegerField()


class StatementSerializer(serializers.Serializer):
    """Serializer for Statement domain model."""

    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.CharField()
    volume_credits = serializers.IntegerField()


class PlaySerializer(serializers.Serializer):
    """Serializer for Play domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    type = serializers.CharField()

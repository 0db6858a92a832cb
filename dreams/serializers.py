from rest_framework import serializers
from .models import Dream, GlobalTrend, SentimentLabel

VALIDATION_MESSAGE = "Please provide both a title and description for your dream."


class DreamSerializer(serializers.ModelSerializer):
    class Meta:
        model = Dream
        fields = '__all__'


class GlobalTrendSerializer(serializers.ModelSerializer):
    class Meta:
        model = GlobalTrend
        fields = '__all__'


class DreamSubmissionSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, allow_blank=True, default="")
    content = serializers.CharField(allow_blank=True, default="")
    is_anonymous = serializers.BooleanField(default=False)

    def validate(self, attrs):
        if not attrs.get("title") or not attrs.get("content"):
            raise serializers.ValidationError(VALIDATION_MESSAGE)
        return attrs


class SymbolSerializer(serializers.Serializer):
    symbol = serializers.CharField()
    interpretation = serializers.CharField(allow_blank=True)


class AnalysisResultSerializer(serializers.Serializer):
    """Shape check for what the analysis service hands back."""

    sentiment_score = serializers.FloatField()
    sentiment_label = serializers.ChoiceField(choices=SentimentLabel.choices)
    emotions = serializers.ListField(child=serializers.CharField(), default=list)
    categories = serializers.ListField(child=serializers.CharField(), default=list)
    symbolism = SymbolSerializer(many=True, default=list)
    mental_health_indicators = serializers.ListField(child=serializers.CharField(), default=list)
    global_trends_correlation = serializers.ListField(child=serializers.CharField(), default=list)

import re

from rest_framework import serializers

# 부호 + 숫자만 허용 ("5.0", " 5" 등은 거부)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class PopulateIn(serializers.Serializer):
    number = serializers.IntegerField(min_value=1, max_value=100)

    def to_internal_value(self, data):
        raw = data.get("number")
        if not isinstance(raw, int) and not _INTEGER_RE.fullmatch(str(raw or "")):
            raise serializers.ValidationError({"number": ["A plain integer is required."]})
        return super().to_internal_value(data)


class DocumentOut(serializers.Serializer):
    username = serializers.CharField()
    email = serializers.CharField(allow_blank=True)
    real_name = serializers.CharField(allow_blank=True)

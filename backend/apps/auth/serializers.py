from rest_framework import serializers


class RegisterRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=254)
    nickname = serializers.CharField(max_length=100)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    confirmPassword = serializers.CharField(write_only=True, trim_whitespace=False)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class LoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()


class MeResponseSerializer(serializers.Serializer):
    email = serializers.EmailField()
    nickname = serializers.CharField()

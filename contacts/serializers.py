import re

from rest_framework import serializers

from .models import Contact

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_RE = re.compile(r'^[0-9\s\-+()]+$')
MIN_PHONE_DIGITS = 10
MESSAGE_MAX_LENGTH = 500


class ContactSerializer(serializers.ModelSerializer):
    """Публічне відображення контакту (camelCase, як очікує фронтенд)."""
    isFavorite = serializers.BooleanField(source='is_favorite', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Contact
        fields = [
            'id', 'name', 'email', 'phone', 'message',
            'category', 'isFavorite', 'createdAt',
        ]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # старі клієнти читають ідентифікатор з "_id"
        data['_id'] = data['id']
        return data


class ContactInputSerializer(serializers.Serializer):
    """
    Валідація тіла POST/PUT.
    Порядок полів визначає порядок повідомлень про помилки.
    При partial=True (PUT) відсутні поля не перевіряються і не змінюються.
    """
    name = serializers.CharField(
        max_length=100,
        error_messages={
            'required': 'Name is required',
            'blank': 'Name is required',
            'null': 'Name is required',
            'max_length': 'Name cannot exceed 100 characters',
        },
    )
    email = serializers.CharField(
        max_length=254,
        error_messages={
            'required': 'Email is required',
            'blank': 'Email is required',
            'null': 'Email is required',
            'max_length': 'Email cannot exceed 254 characters',
        },
    )
    phone = serializers.CharField(
        max_length=30,
        error_messages={
            'required': 'Phone number is required',
            'blank': 'Phone number is required',
            'null': 'Phone number is required',
            'max_length': 'Phone number cannot exceed 30 characters',
        },
    )
    message = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default='',
        max_length=MESSAGE_MAX_LENGTH,
        error_messages={
            'max_length': f'Message cannot exceed {MESSAGE_MAX_LENGTH} characters',
        },
    )
    category = serializers.ChoiceField(
        choices=Contact.Category.choices,
        required=False,
        allow_blank=True,
        allow_null=True,
        default=Contact.Category.OTHER,
        error_messages={
            'invalid_choice': 'Category must be one of: ' + ', '.join(Contact.Category.values),
        },
    )

    def validate_name(self, value):
        if len(value) < 2:
            raise serializers.ValidationError('Name must be at least 2 characters')
        return value

    def validate_email(self, value):
        if not EMAIL_RE.match(value):
            raise serializers.ValidationError('Please enter a valid email')
        return value

    def validate_phone(self, value):
        if not PHONE_RE.match(value):
            raise serializers.ValidationError('Please enter a valid phone number')
        if len(re.findall(r'[0-9]', value)) < MIN_PHONE_DIGITS:
            raise serializers.ValidationError(f'Phone must be at least {MIN_PHONE_DIGITS} digits')
        return value

    def validate_message(self, value):
        return value or ''

    def validate_category(self, value):
        return value or Contact.Category.OTHER


def flatten_errors(errors) -> list[str]:
    """{'name': ['...'], 'phone': ['...']} -> ['...', '...'] у порядку полів."""
    if isinstance(errors, dict):
        out = []
        for messages in errors.values():
            out.extend(flatten_errors(messages))
        return out
    if isinstance(errors, (list, tuple)):
        out = []
        for item in errors:
            out.extend(flatten_errors(item))
        return out
    return [str(errors)]

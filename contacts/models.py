import uuid

from django.db import models
from django.utils import timezone


class Contact(models.Model):
    class Category(models.TextChoices):
        WORK = 'Work', 'Work'
        PERSONAL = 'Personal', 'Personal'
        FAMILY = 'Family', 'Family'
        FRIEND = 'Friend', 'Friend'
        BUSINESS = 'Business', 'Business'
        OTHER = 'Other', 'Other'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    email = models.CharField(max_length=254)
    phone = models.CharField(max_length=30)
    message = models.TextField(max_length=500, blank=True, default='')
    category = models.CharField(
        max_length=16,
        choices=Category.choices,
        default=Category.OTHER
    )
    is_favorite = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['created_at'], name='contact_created_idx'),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}>"

"""
URL configuration for the contactbook project.

The contacts API lives under /api/contacts/; the Django admin under /admin/.
"""
from django.contrib import admin
from django.urls import path, re_path, include

from contacts.views import ApiRootView


urlpatterns = [
    path('', ApiRootView.as_view(), name='api-root'),
    path('admin/', admin.site.urls),
    re_path(r'^api/contacts', include('contacts.urls')),
]

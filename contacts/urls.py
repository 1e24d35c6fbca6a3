from django.urls import re_path
from .views import ContactListCreateView, ContactDetailView, ContactFavoriteView

# Префікс "api/contacts" підключено без слеша, тож слеш у кінці необов'язковий.
urlpatterns = [
    re_path(r'^/?$', ContactListCreateView.as_view(), name='contact-list'),
    re_path(r'^/(?P<contact_id>[^/]+)/?$', ContactDetailView.as_view(), name='contact-detail'),
    re_path(r'^/(?P<contact_id>[^/]+)/favorite/?$', ContactFavoriteView.as_view(), name='contact-favorite'),
]

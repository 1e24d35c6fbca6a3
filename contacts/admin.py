from django.contrib import admin
from .models import Contact


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'phone', 'category', 'is_favorite', 'created_at')
    list_filter = ('category', 'is_favorite')
    search_fields = ('name', 'email', 'phone')
    readonly_fields = ('id', 'created_at')
    ordering = ('-created_at',)
    actions = ['mark_favorite', 'unmark_favorite']

    def mark_favorite(self, request, queryset):
        queryset.update(is_favorite=True)
    mark_favorite.short_description = "Додати вибрані контакти до обраних"

    def unmark_favorite(self, request, queryset):
        queryset.update(is_favorite=False)
    unmark_favorite.short_description = "Прибрати вибрані контакти з обраних"

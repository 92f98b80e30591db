from django.contrib import admin
from .models import Pet


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "species", "breed", "age", "owner", "created_at")
    list_filter = ("species",)
    search_fields = ("name", "breed", "owner__email")
    readonly_fields = ("created_at", "updated_at")

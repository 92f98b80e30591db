from django.contrib import admin
from .models import SharedRecord


@admin.register(SharedRecord)
class SharedRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "pet", "owner", "vet_name", "view_count", "created_at", "expires_at")
    search_fields = ("pet__name", "owner__email", "vet_name", "vet_email")
    readonly_fields = ("share_token", "view_count", "created_at")
    filter_horizontal = ("checks",)

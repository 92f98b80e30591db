from django.contrib import admin
from .models import SymptomCheck, ErrorLog


@admin.register(SymptomCheck)
class SymptomCheckAdmin(admin.ModelAdmin):
    list_display = ("id", "pet", "severity_category", "media_count", "created_at")
    list_filter = ("severity_category",)
    search_fields = ("symptoms", "pet__name")
    readonly_fields = ("created_at",)


@admin.register(ErrorLog)
class ErrorLogAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "message", "created_at")
    list_filter = ("type",)
    search_fields = ("message",)
    readonly_fields = ("created_at",)

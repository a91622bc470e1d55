# core/admin.py
from django.contrib import admin

from .models import CoreSetting, SequenceCounter


@admin.register(SequenceCounter)
class SequenceCounterAdmin(admin.ModelAdmin):
    list_display = ("name", "current_number", "updated_at")
    readonly_fields = ("updated_at",)
    search_fields = ("name",)


@admin.register(CoreSetting)
class CoreSettingAdmin(admin.ModelAdmin):
    list_display = ("code", "value", "notes")
    search_fields = ("code", "value")

from django.contrib import admin
from .models import Dream, GlobalTrend


@admin.register(Dream)
class DreamAdmin(admin.ModelAdmin):
    list_display = ("title", "created_by", "sentiment_label", "sentiment_score", "created_at")
    search_fields = ("title", "content", "created_by")
    list_filter = ("sentiment_label", "is_anonymous", "created_at")
    readonly_fields = [f.name for f in Dream._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(GlobalTrend)
class GlobalTrendAdmin(admin.ModelAdmin):
    list_display = ("event_name", "event_type", "sentiment_impact", "created_at")
    search_fields = ("event_name", "description")
    list_filter = ("event_type",)

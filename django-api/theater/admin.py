from django.contrib import admin

from theater.models import Play


@admin.register(Play)
class PlayAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "type"]
    list_filter = ["type"]
    search_fields = ["id", "name"]

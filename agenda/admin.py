from django.contrib import admin

from agenda.models import Event, Occurrence


class OccurrenceInline(admin.TabularInline):
    model = Occurrence
    extra = 0
    can_delete = False
    readonly_fields = ["sequence_index", "date", "title", "description"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "kind", "frequency", "start_date", "created_at"]
    list_filter = ["kind", "frequency", "end_condition"]
    search_fields = ["title"]
    inlines = [OccurrenceInline]

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(Occurrence)
class OccurrenceAdmin(admin.ModelAdmin):
    list_display = ["title", "date", "sequence_index", "event"]
    list_filter = ["date"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

from django.contrib import admin

from program.models import Item, School


class ItemInline(admin.TabularInline):
    model = Item
    extra = 1
    fields = ["item_type", "item_code", "language", "status"]


@admin.register(School)
class SchoolAdmin(admin.ModelAdmin):
    list_display = ["school_name", "category", "teacher_name", "total_items", "created_at"]
    list_filter = ["category"]
    search_fields = ["school_name", "teacher_name"]
    inlines = [ItemInline]


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ["item_code", "item_type", "school", "language", "status"]
    list_filter = ["status", "school__category"]
    search_fields = ["item_code", "school__school_name"]

from django.contrib import admin

from .models import Approver, Mom, MomAttachmentFile, MomAttachmentSection, NextAction


class ApproverInline(admin.TabularInline):
    model = Approver
    extra = 0


class NextActionInline(admin.TabularInline):
    model = NextAction
    extra = 0


class AttachmentSectionInline(admin.TabularInline):
    model = MomAttachmentSection
    extra = 0
    show_change_link = True


@admin.register(Mom)
class MomAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "company", "date", "progress", "created_at")
    list_filter = ("date",)
    search_fields = ("title", "company__name")
    autocomplete_fields = ("company",)
    inlines = [ApproverInline, NextActionInline, AttachmentSectionInline]


class AttachmentFileInline(admin.TabularInline):
    model = MomAttachmentFile
    extra = 0


@admin.register(MomAttachmentSection)
class MomAttachmentSectionAdmin(admin.ModelAdmin):
    list_display = ("id", "mom", "section_name", "position")
    inlines = [AttachmentFileInline]

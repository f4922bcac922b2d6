from django.contrib import admin
from .models import Project, Experience, About, Document, Message
from .models import PageView, ProjectView, AdminProfile

@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "created_at", "updated_at")
    list_filter = ("category",)
    search_fields = ("title", "description")

@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ("position", "company", "duration", "order")
    search_fields = ("position", "company")

@admin.register(About)
class AboutAdmin(admin.ModelAdmin):
    list_display = ("id", "resume_url", "updated_at")

    def has_add_permission(self, request):
        return not About.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "file_name", "file_size", "created_at")
    list_filter = ("type",)

@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("name", "email", "message")

@admin.register(PageView)
class PageViewAdmin(admin.ModelAdmin):
    list_display = ("page_path", "device_type", "browser", "os", "visitor_id", "created_at")
    list_filter = ("device_type", "browser", "os")

@admin.register(ProjectView)
class ProjectViewAdmin(admin.ModelAdmin):
    list_display = ("project", "visitor_id", "created_at")

@admin.register(AdminProfile)
class AdminProfileAdmin(admin.ModelAdmin):
    list_display = ("email", "role", "created_at")

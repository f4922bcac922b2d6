from django.conf import settings
from django.db import models
from django.utils import timezone


class Project(models.Model):
    CATEGORY_CHOICES = [
        ('network', 'Network'),
        ('web', 'Web'),
        ('ai', 'AI'),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField()
    tech_stack = models.JSONField(default=list)
    # bucket URLs may be site-relative
    image_url = models.CharField(max_length=500, blank=True, null=True)
    demo_url = models.URLField(max_length=500, blank=True, null=True)
    repo_url = models.URLField(max_length=500, blank=True, null=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default='web')
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'projects'

    def __str__(self):
        return self.title


class Experience(models.Model):
    position = models.CharField(max_length=200)
    company = models.CharField(max_length=200)
    duration = models.CharField(max_length=100, blank=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    # Either a paragraph or a list of bullet strings.
    description = models.JSONField(default=str, blank=True)
    skills = models.JSONField(default=list, blank=True)
    order = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'experiences'

    def __str__(self):
        return f"{self.position} at {self.company}"


class About(models.Model):
    SINGLETON_ID = 1

    bio = models.TextField(blank=True)
    skills = models.JSONField(default=list, blank=True)
    contact_info = models.JSONField(default=dict, blank=True)
    resume_url = models.URLField(max_length=500, blank=True, null=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'about'
        verbose_name_plural = 'about'

    def __str__(self):
        return "About Me"


class Document(models.Model):
    TYPE_CHOICES = [
        ('cv', 'CV'),
        ('certificate', 'Certificate'),
    ]

    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    title = models.CharField(max_length=200)
    file_url = models.CharField(max_length=500)
    file_name = models.CharField(max_length=255)
    file_size = models.BigIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'documents'

    def __str__(self):
        return self.title


class Message(models.Model):
    STATUS_CHOICES = [
        ('new', 'New'),
        ('read', 'Read'),
    ]

    name = models.CharField(max_length=200)
    email = models.EmailField()
    message = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='new')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'messages'

    def __str__(self):
        return f"{self.name} <{self.email}>"


class PageView(models.Model):
    page_path = models.CharField(max_length=500)
    page_title = models.CharField(max_length=300, blank=True)
    referrer = models.CharField(max_length=500, default='direct')
    user_agent = models.CharField(max_length=500, blank=True)
    device_type = models.CharField(max_length=20, default='desktop')
    browser = models.CharField(max_length=40, blank=True)
    os = models.CharField(max_length=40, blank=True)
    session_id = models.CharField(max_length=64)
    visitor_id = models.CharField(max_length=64)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'page_views'

    def __str__(self):
        return self.page_path


class ProjectView(models.Model):
    # Views outlive the project they point at.
    project = models.ForeignKey(Project, on_delete=models.SET_NULL, null=True, blank=True, related_name='views')
    session_id = models.CharField(max_length=64)
    visitor_id = models.CharField(max_length=64)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'project_views'


class AdminProfile(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='admin_profile')
    email = models.EmailField()
    role = models.CharField(max_length=20, default='admin')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'admins'

    def __str__(self):
        return self.email

from rest_framework import serializers

from . import conf
from .models import Project, About, Document, Experience, Message
from .services.uploads import file_extension

READ_ONLY = ['id', 'created_at', 'updated_at']


def validate_extension(upload, allowed):
    ext = file_extension(upload.name)
    if ext not in allowed:
        raise serializers.ValidationError(
            f"Unsupported file type '.{ext}'. Allowed: {', '.join(allowed)}."
        )
    return upload


class ProjectSerializer(serializers.ModelSerializer):
    tech_stack = serializers.ListField(child=serializers.CharField(), allow_empty=False)

    class Meta:
        model = Project
        fields = '__all__'
        read_only_fields = READ_ONLY
        extra_kwargs = {
            'image_url': {'required': True, 'allow_null': False, 'allow_blank': False},
        }


class ExperienceSerializer(serializers.ModelSerializer):
    description = serializers.JSONField(required=False)
    skills = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Experience
        fields = '__all__'
        read_only_fields = ['id', 'created_at']

    def validate_description(self, value):
        if isinstance(value, str):
            return value
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        raise serializers.ValidationError('Description must be text or a list of bullet strings.')


class ContactInfoSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    linkedin = serializers.URLField(required=False, allow_blank=True)
    github = serializers.URLField(required=False, allow_blank=True)


class AboutMeSerializer(serializers.ModelSerializer):
    skills = serializers.ListField(child=serializers.CharField(), required=False)
    contact_info = ContactInfoSerializer(required=False)

    class Meta:
        model = About
        fields = '__all__'
        read_only_fields = ['id', 'updated_at']


class DocumentUploadSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=Document.TYPE_CHOICES)
    title = serializers.CharField(max_length=200)
    file = serializers.FileField()

    def validate_file(self, value):
        return validate_extension(value, conf.get('DOCUMENT_EXTENSIONS'))


class ProjectImageSerializer(serializers.Serializer):
    image = serializers.FileField()

    def validate_image(self, value):
        return validate_extension(value, conf.get('IMAGE_EXTENSIONS'))


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Message
        fields = ['name', 'email', 'message']


class PageViewSerializer(serializers.Serializer):
    page_path = serializers.CharField(max_length=500)
    page_title = serializers.CharField(max_length=300, required=False, allow_blank=True)
    referrer = serializers.CharField(max_length=500, required=False, allow_blank=True)
    visitor_id = serializers.CharField(max_length=64, required=False)
    session_id = serializers.CharField(max_length=64, required=False)


class ProjectViewSerializer(serializers.Serializer):
    project_id = serializers.IntegerField()
    visitor_id = serializers.CharField(max_length=64, required=False)
    session_id = serializers.CharField(max_length=64, required=False)


class CredentialsSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)

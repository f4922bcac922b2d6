from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path
from django.views.static import serve


def media(request, path):
    # uploaded documents are public, like a public storage bucket
    return serve(request, path, document_root=settings.MEDIA_ROOT)


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('portfolio.urls')),
    re_path(r'^media/(?P<path>.*)$', media),
]

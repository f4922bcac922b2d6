import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout

from django.db import connections
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from . import conf
from .permissions import IsAdminOrReadOnly, IsSignedIn
from .serializers import (
    AboutMeSerializer,
    ContactMessageSerializer,
    CredentialsSerializer,
    DocumentUploadSerializer,
    ExperienceSerializer,
    PageViewSerializer,
    ProjectImageSerializer,
    ProjectSerializer,
    ProjectViewSerializer,
)
from .services import (
    AboutService,
    AnalyticsService,
    DocumentService,
    ExperienceService,
    MessageService,
    ProjectService,
)
from .tracking import VISITOR_COOKIE, track_page_view, track_project_view, visitor_ids

logger = logging.getLogger(__name__)

# The public project list gets its own pool so a slow backend can be
# abandoned after PROJECT_LIST_TIMEOUT without blocking the response. An
# abandoned query still holds its worker until it returns, so once
# PROJECT_LIST_WORKERS queries are stuck new requests queue behind them.
_project_list_pool = ThreadPoolExecutor(
    max_workers=conf.get('PROJECT_LIST_WORKERS'), thread_name_prefix='project-list'
)

VISITOR_COOKIE_AGE = 60 * 60 * 24 * 365


def _list_projects(gateway, category):
    try:
        service = ProjectService(gateway)
        if category:
            return service.list_by_category(category)
        return service.list()
    finally:
        connections.close_all()


def _int_param(request, name, default, minimum=1, maximum=None):
    try:
        value = max(int(request.query_params.get(name, default)), minimum)
    except (TypeError, ValueError):
        return default
    if maximum is not None:
        value = min(value, maximum)
    return value


def _days_param(request):
    return _int_param(
        request, 'days', conf.get('ANALYTICS_DEFAULT_DAYS'), maximum=conf.get('ANALYTICS_MAX_DAYS')
    )


def _session_payload(request):
    store = request.session_store
    return {
        "state": store.state.value,
        "is_authenticated": store.is_authenticated,
        "user": store.user.as_dict() if store.user else None,
        "config_warning": conf.config_warning(),
    }


# --- Projects ---

class ProjectList(APIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        category = request.query_params.get('category')
        if category == 'all':
            category = None

        timeout = conf.get('PROJECT_LIST_TIMEOUT')
        future = _project_list_pool.submit(_list_projects, request.gateway, category)
        try:
            projects = future.result(timeout=timeout)
        except FutureTimeout:
            # the query keeps running, only the caller stops waiting
            logger.warning('Loading projects timed out after %ss', timeout)
            return Response(
                {"error": "Loading projects is taking too long. Please try again."},
                status=status.HTTP_504_GATEWAY_TIMEOUT,
            )
        return Response(projects)

    def post(self, request):
        serializer = ProjectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        project = ProjectService(request.gateway).create(serializer.validated_data)
        return Response(project, status=status.HTTP_201_CREATED)


class ProjectDetail(APIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request, pk):
        project = ProjectService(request.gateway).get(pk)
        if project is None:
            return Response({"error": "Project not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(project)

    def patch(self, request, pk):
        serializer = ProjectSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        project = ProjectService(request.gateway).update(pk, serializer.validated_data)
        return Response(project)

    def delete(self, request, pk):
        ProjectService(request.gateway).delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProjectImageUpload(APIView):
    permission_classes = [IsSignedIn]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        serializer = ProjectImageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        url = ProjectService(request.gateway).upload_image(serializer.validated_data['image'])
        return Response({"image_url": url}, status=status.HTTP_201_CREATED)


# --- Experience ---

class ExperienceList(APIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        return Response(ExperienceService(request.gateway).list())

    def post(self, request):
        serializer = ExperienceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        experience = ExperienceService(request.gateway).create(serializer.validated_data)
        return Response(experience, status=status.HTTP_201_CREATED)


class ExperienceDetail(APIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request, pk):
        experience = ExperienceService(request.gateway).get(pk)
        if experience is None:
            return Response({"error": "Experience not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(experience)

    def patch(self, request, pk):
        serializer = ExperienceSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        experience = ExperienceService(request.gateway).update(pk, serializer.validated_data)
        return Response(experience)

    def delete(self, request, pk):
        ExperienceService(request.gateway).delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


# --- About ---

class AboutMeDetail(APIView): # Only one About row, so no list/create/delete
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        return Response(AboutService(request.gateway).get())

    def patch(self, request):
        serializer = AboutMeSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        about = AboutService(request.gateway).save(serializer.validated_data)
        return Response(about)


# --- Documents ---

class DocumentList(APIView):
    permission_classes = [IsAdminOrReadOnly]
    parser_classes = [MultiPartParser, FormParser]

    def get(self, request):
        service = DocumentService(request.gateway)
        doc_type = request.query_params.get('type')
        if doc_type:
            return Response(service.list_by_type(doc_type))
        return Response(service.list())

    def post(self, request):
        serializer = DocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        document = DocumentService(request.gateway).upload_document(data['file'], data['type'], data['title'])
        return Response(document, status=status.HTTP_201_CREATED)


class CurrentCV(APIView):
    def get(self, request):
        return Response(DocumentService(request.gateway).get_cv())


class DocumentDetail(APIView):
    permission_classes = [IsSignedIn]

    def delete(self, request, pk):
        DocumentService(request.gateway).delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


# --- Contact & tracking ---

class ContactView(APIView):
    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        message = MessageService(request.gateway).submit(data['name'], data['email'], data['message'])
        return Response({"success": True, "id": message['id']}, status=status.HTTP_201_CREATED)


class PageViewTrack(APIView):
    def post(self, request):
        serializer = PageViewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        visitor_id, session_id = visitor_ids(request, data.get('visitor_id'), data.get('session_id'))
        tracked = track_page_view(
            request.gateway,
            data['page_path'],
            page_title=data.get('page_title', ''),
            referrer=data.get('referrer') or request.META.get('HTTP_REFERER', ''),
            user_agent=request.META.get('HTTP_USER_AGENT', ''),
            visitor_id=visitor_id,
            session_id=session_id,
        )
        response = Response({"tracked": tracked}, status=status.HTTP_202_ACCEPTED)
        response.set_cookie(VISITOR_COOKIE, visitor_id, max_age=VISITOR_COOKIE_AGE, samesite='Lax')
        return response


class ProjectViewTrack(APIView):
    def post(self, request):
        serializer = ProjectViewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        visitor_id, session_id = visitor_ids(request, data.get('visitor_id'), data.get('session_id'))
        tracked = track_project_view(request.gateway, data['project_id'], visitor_id=visitor_id, session_id=session_id)
        response = Response({"tracked": tracked}, status=status.HTTP_202_ACCEPTED)
        response.set_cookie(VISITOR_COOKIE, visitor_id, max_age=VISITOR_COOKIE_AGE, samesite='Lax')
        return response


# --- Admin ---

class MessageList(APIView):
    permission_classes = [IsSignedIn]

    def get(self, request):
        status_filter = request.query_params.get('status')
        return Response(MessageService(request.gateway).list(status=status_filter))


class MessageRead(APIView):
    permission_classes = [IsSignedIn]

    def post(self, request, pk):
        return Response(MessageService(request.gateway).mark_read(pk))


class Dashboard(APIView):
    permission_classes = [IsSignedIn]

    def get(self, request):
        days = _days_param(request)
        recent = _int_param(request, 'recent', 10, maximum=100)
        partial = request.query_params.get('partial') in ('1', 'true')
        stats = AnalyticsService(request.gateway).dashboard(days=days, recent=recent, isolate=partial)
        return Response(stats)


class PageViewStats(APIView):
    """Raw page views of the window, newest first."""

    permission_classes = [IsSignedIn]

    def get(self, request):
        days = _days_param(request)
        return Response(AnalyticsService(request.gateway).get_page_view_stats(days))


class ProjectViewStats(APIView):
    """Views per project in the window, most viewed first."""

    permission_classes = [IsSignedIn]

    def get(self, request):
        days = _days_param(request)
        return Response(AnalyticsService(request.gateway).get_project_view_stats(days))


# --- Auth & preferences ---

class SessionView(APIView):
    def get(self, request):
        return Response(_session_payload(request))


class SignIn(APIView):
    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        request.session_store.sign_in(**serializer.validated_data)
        return Response(_session_payload(request))


class SignUp(APIView):
    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        request.session_store.sign_up(**serializer.validated_data)
        return Response(_session_payload(request), status=status.HTTP_201_CREATED)


class SignOut(APIView):
    def post(self, request):
        request.session_store.sign_out()
        return Response(_session_payload(request))


class ThemePreference(APIView):
    def get(self, request):
        return Response({"is_dark": request.theme.is_dark})

    def post(self, request):
        return Response({"is_dark": request.theme.toggle()})

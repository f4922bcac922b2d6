from django.urls import path
from .views import (
    ProjectList, ProjectDetail, ProjectImageUpload,
    ExperienceList, ExperienceDetail,
    AboutMeDetail,
    DocumentList, DocumentDetail, CurrentCV,
    ContactView, PageViewTrack, ProjectViewTrack,
    MessageList, MessageRead, Dashboard, PageViewStats, ProjectViewStats,
    SessionView, SignIn, SignUp, SignOut,
    ThemePreference,
)

urlpatterns = [
    path('projects/', ProjectList.as_view(), name='project-list'),
    path('projects/images/', ProjectImageUpload.as_view(), name='project-image-upload'),
    path('projects/<int:pk>/', ProjectDetail.as_view(), name='project-detail'),

    path('experience/', ExperienceList.as_view(), name='experience-list'),
    path('experience/<int:pk>/', ExperienceDetail.as_view(), name='experience-detail'),

    path('about-me/', AboutMeDetail.as_view(), name='about-me-detail'),

    path('documents/', DocumentList.as_view(), name='document-list'),
    path('documents/cv/', CurrentCV.as_view(), name='document-cv'),
    path('documents/<int:pk>/', DocumentDetail.as_view(), name='document-detail'),

    path('contact/', ContactView.as_view(), name='contact'),
    path('analytics/page-views/', PageViewTrack.as_view(), name='track-page-view'),
    path('analytics/project-views/', ProjectViewTrack.as_view(), name='track-project-view'),

    path('admin/messages/', MessageList.as_view(), name='message-list'),
    path('admin/messages/<int:pk>/read/', MessageRead.as_view(), name='message-read'),
    path('admin/dashboard/', Dashboard.as_view(), name='dashboard'),
    path('admin/analytics/page-views/', PageViewStats.as_view(), name='page-view-stats'),
    path('admin/analytics/projects/', ProjectViewStats.as_view(), name='project-view-stats'),

    path('auth/session/', SessionView.as_view(), name='auth-session'),
    path('auth/sign-in/', SignIn.as_view(), name='auth-sign-in'),
    path('auth/sign-up/', SignUp.as_view(), name='auth-sign-up'),
    path('auth/sign-out/', SignOut.as_view(), name='auth-sign-out'),

    path('preferences/theme/', ThemePreference.as_view(), name='theme'),
]

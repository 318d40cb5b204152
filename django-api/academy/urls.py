from django.urls import include, path

from content.handlers import HealthView

urlpatterns = [
    path("", HealthView.as_view(), name="health"),
    path("api/", include("content.urls")),
]

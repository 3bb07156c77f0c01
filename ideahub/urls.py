from django.contrib import admin
from django.urls import path, include
from submissions import health

handler404 = "submissions.views.custom_404_view"
handler500 = "submissions.views.custom_500_view"

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health.health_check, name="health_check"),
    path("health/ready/", health.readiness_check, name="readiness_check"),
    path("health/details/", health.detailed_health, name="detailed_health"),
    path("api/", include("submissions.api.urls")),
    path("", include("submissions.urls", namespace="submissions")),
]

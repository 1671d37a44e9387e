from django.urls import path, include
from . import views

app_name = "pagenav"

urlpatterns = [
    path("", views.ResultsView.as_view(), name="results"),

    # API
    path("api/", include(("pagenav.api_urls", "pagenav_api"), namespace="pagenav_api")),
]

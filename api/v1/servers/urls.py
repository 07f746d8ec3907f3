"""
URL configuration for server API endpoints.
"""

from django.urls import path

from api.v1.servers import views

app_name = "servers"

urlpatterns = [
    path(
        "<int:server_id>/activation-keys/",
        views.ServerActivationKeysView.as_view(),
        name="server-activation-keys",
    ),
]

"""
URL configuration for activation key API endpoints.
"""

from django.urls import path

from api.v1.activation_keys import views

app_name = "activation_keys"

urlpatterns = [
    path(
        "",
        views.ActivationKeyCreateView.as_view(),
        name="create-activation-key",
    ),
    path(
        "<str:key>/",
        views.ActivationKeyDetailView.as_view(),
        name="activation-key-detail",
    ),
    path(
        "<str:key>/kickstarts/",
        views.ActivationKeyKickstartsView.as_view(),
        name="activation-key-kickstarts",
    ),
]

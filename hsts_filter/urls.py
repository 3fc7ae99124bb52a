from django.urls import path

from . import views

app_name = "hsts_filter"

urlpatterns = [
    path("policy/", views.policy_view, name="policy"),
]

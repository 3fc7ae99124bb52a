from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def ok(request):
    return HttpResponse("OK")


def already_has_hsts(request):
    response = HttpResponse("OK")
    response["Strict-Transport-Security"] = "max-age=1"
    return response


urlpatterns = [
    path("admin/", admin.site.urls),
    path("hsts/", include("hsts_filter.urls")),
    path("ok/", ok, name="ok"),
    path("preset-hsts/", already_has_hsts, name="preset_hsts"),
]

from django.urls import path
from .views import AnalyzeView, SymptomCheckDetailView, EmergencyCheckView, StatsView

app_name = "triage"

urlpatterns = [
    path("analyze/", AnalyzeView.as_view(), name="analyze"),
    path("checks/<int:pk>/", SymptomCheckDetailView.as_view(), name="check-detail"),
    path("emergency-check/", EmergencyCheckView.as_view(), name="emergency-check"),
    path("stats/", StatsView.as_view(), name="stats"),
]

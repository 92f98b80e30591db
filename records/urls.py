from django.urls import path
from .views import ShareListCreateView, ShareRevokeView, SharedRecordView

urlpatterns = [
    path("share/", ShareListCreateView.as_view(), name="share"),
    path("share/<str:token>/", ShareRevokeView.as_view(), name="share-revoke"),
    path("shared/<str:token>/", SharedRecordView.as_view(), name="shared-record"),
]

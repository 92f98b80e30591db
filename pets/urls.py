from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import PetViewSet, SpeciesListView

router = SimpleRouter()
router.register(r'', PetViewSet, basename='pets')

urlpatterns = [
    path('species/', SpeciesListView.as_view(), name='species'),
    path('', include(router.urls)),
]

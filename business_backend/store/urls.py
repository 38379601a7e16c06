# store/urls.py

"""
/api/store/stores/          owner-scoped list / create
/api/store/stores/<uuid>/   owner-scoped retrieve / update
/api/store/stores/public/   active stores, no auth
"""

from rest_framework.routers import SimpleRouter

from store.views import StoreViewSet

router = SimpleRouter()
router.register(r"stores", StoreViewSet, basename="stores")

urlpatterns = router.urls

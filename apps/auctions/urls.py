from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'auctions'

router = DefaultRouter()
router.register(r'', views.AuctionRecordViewSet, basename='auction')

urlpatterns = [
    # GET    /api/auctions/                 - List auctions (?group=<id>)
    # POST   /api/auctions/                 - Record auction and bill members
    # GET    /api/auctions/{id}/            - Auction detail
    # GET    /api/auctions/{id}/charges/    - Per-member installment charges
    # POST   /api/auctions/preview/         - Settlement preview for a bid
    path('', include(router.urls)),
]

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'ledger'

router = DefaultRouter()
router.register(r'collections', views.CollectionViewSet, basename='collection')
router.register(r'payments', views.PaymentViewSet, basename='payment')
router.register(r'credits', views.CreditViewSet, basename='credit')
router.register(r'expenses', views.ExpenseViewSet, basename='expense')
router.register(r'salaries', views.SalaryViewSet, basename='salary')

urlpatterns = [
    # Each of collections/, payments/, credits/, expenses/, salaries/:
    # GET    /api/ledger/<kind>/        - List entries (newest first)
    # POST   /api/ledger/<kind>/        - Record an entry
    # GET    /api/ledger/<kind>/{id}/   - Entry detail

    # POST   /api/ledger/members/{id}/reconcile/ - Recompute a member's due (admin)
    path('members/<uuid:pk>/reconcile/', views.reconcile_member, name='reconcile-member'),

    path('', include(router.urls)),
]

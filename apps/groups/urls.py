from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'groups'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.GroupViewSet, basename='group')

urlpatterns = [
    # Group ViewSet routes
    # GET    /api/groups/                       - List groups
    # POST   /api/groups/                       - Create group (admin)
    # GET    /api/groups/{id}/                  - Group details incl. max bid
    # GET    /api/groups/{id}/members/          - Members in seating order
    # POST   /api/groups/{id}/add_member/       - Seat a member (admin)
    # GET    /api/groups/{id}/auction_state/    - Used auction numbers and winners (staff)

    # Additional endpoints
    path('my/', views.my_groups, name='my-groups'),

    # Include router URLs
    path('', include(router.urls)),
]

from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('login/', views.login, name='login'),
    path('me/', views.get_current_user, name='current-user'),

    # People
    path('members/', views.MemberListCreateView.as_view(), name='member-list'),
    path('members/<uuid:pk>/', views.MemberDetailView.as_view(), name='member-detail'),
    path('employees/', views.EmployeeListCreateView.as_view(), name='employee-list'),
]

from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    # Cash position
    path('day-sheet/', views.day_sheet, name='day-sheet'),
    path('master-record/', views.master_record, name='master-record'),

    # Dues
    path('due-sheet/', views.due_sheet, name='due-sheet'),
    path('members/<uuid:user_id>/statement/', views.member_statement, name='member-statement'),

    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),
]

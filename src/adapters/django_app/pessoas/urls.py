"""
URL patterns para clientes, técnicos e login.

- /clientes, /clientes/<id>
- /tecnicos, /tecnicos/<id>
- /login
"""

from django.urls import path

from . import api_views

app_name = 'pessoas'

urlpatterns = [
    path('login', api_views.LoginAPIView.as_view(), name='login'),

    path('clientes', api_views.ClienteAPIListView.as_view(), name='clientes'),
    path('clientes/<int:pk>', api_views.ClienteAPIDetailView.as_view(), name='cliente_detail'),

    path('tecnicos', api_views.TecnicoAPIListView.as_view(), name='tecnicos'),
    path('tecnicos/<int:pk>', api_views.TecnicoAPIDetailView.as_view(), name='tecnico_detail'),
]

"""
URL patterns para o domínio de Chamados.

- /chamados       (GET, POST)
- /chamados/<id>  (GET, PUT, DELETE)
"""

from django.urls import path

from . import api_views

app_name = 'chamados'

urlpatterns = [
    path('chamados', api_views.ChamadoAPIListView.as_view(), name='list'),
    path('chamados/<int:pk>', api_views.ChamadoAPIDetailView.as_view(), name='detail'),
]

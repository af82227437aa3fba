"""
URL Configuration para o Helpdesk.

Estrutura:
- /admin/ - Django Admin
- /login, /clientes, /tecnicos - Pessoas
- /chamados - Chamados
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API
    path('', include('src.adapters.django_app.pessoas.urls')),
    path('', include('src.adapters.django_app.chamados.urls')),

    # Health check
    path('health/', health, name='health'),
]

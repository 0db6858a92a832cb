# dreams/urls.py
from django.urls import path
from .views import analytics, gallery, get_dream, list_dreams, list_trends, submit_dream

urlpatterns = [
    path('dreams/', list_dreams, name='list_dreams'),
    path('dreams/gallery/', gallery, name='gallery'),
    path('dreams/submit/', submit_dream, name='submit_dream'),
    path('dreams/<uuid:id>/', get_dream, name='get_dream'),
    path('trends/', list_trends, name='list_trends'),
    path('analytics/', analytics, name='analytics'),
]

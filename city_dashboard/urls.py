from django.urls import include, path

urlpatterns = [
    path('', include('aggregator.urls')),
]

handler404 = 'aggregator.views.endpoint_not_found'

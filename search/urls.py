from django.urls import path, re_path

from .views import UserSearchViewSet

urlpatterns = [
    path("", UserSearchViewSet.as_view({"get": "home"}), name="home"),
    # 빈 검색어도 엔진 multi_match로 그대로 전달
    re_path(r"^search/(?P<term>[^/]*)$", UserSearchViewSet.as_view({"get": "search"}), name="search"),
    path("populate/<str:number>", UserSearchViewSet.as_view({"get": "populate"}), name="populate"),
]

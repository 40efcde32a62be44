import logging

from django.http import HttpResponse
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer

from . import services
from .exceptions import EngineError
from .serializers import DocumentOut, PopulateIn

log = logging.getLogger(__name__)

HOME_MESSAGE = b"The service mini-search-engine is working!"
POPULATED_MESSAGE = b"Populated!"
BAD_VALUE_MESSAGE = b"ERROR: bad value"

# 검색 라우트는 윈도우 고정 (offset 0, size 20)
SEARCH_WINDOW = (0, 20)


def send(content: bytes, content_type: str, status_code: int) -> HttpResponse:
    resp = HttpResponse(content, content_type=content_type, status=status_code)
    resp["Content-Length"] = str(len(content))
    return resp


class UserSearchViewSet(viewsets.ViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Health"],
        summary="서비스 상태 확인",
        operation_id="home",
        responses={200: OpenApiResponse(response=OpenApiTypes.STR, description="고정 문자열 (text/plain)")},
    )
    def home(self, request):
        return send(HOME_MESSAGE, "text/plain", status.HTTP_200_OK)

    @extend_schema(
        tags=["Search"],
        summary="사용자 퍼지 검색",
        description=(
            "`username`, `email`, `real_name` 세 필드에 대해 fuzziness `AUTO:2,5` multi_match 검색을 수행합니다.\n\n"
            "- 결과는 관련도 순, 최대 20건 (offset 0)\n"
            "- 엔진 오류 시 400과 함께 오류 텍스트(text/plain)를 반환합니다."
        ),
        operation_id="search_users",
        parameters=[OpenApiParameter(name="term", location=OpenApiParameter.PATH, required=True, type=OpenApiTypes.STR, description="검색어")],
        responses={
            200: OpenApiResponse(response=DocumentOut(many=True), description="검색 결과"),
            400: OpenApiResponse(response=OpenApiTypes.STR, description="엔진 오류 텍스트"),
        },
        examples=[OpenApiExample("예시", value=None, request_only=True, description="GET /search/johndoe")],
    )
    def search(self, request, term=None):
        try:
            docs = services.search_users(term, *SEARCH_WINDOW)
        except EngineError as e:
            log.error("ERROR: [Request] %s", e)
            return send(str(e).encode(), "text/plain", status.HTTP_400_BAD_REQUEST)
        body = JSONRenderer().render(DocumentOut(docs, many=True).data)
        return send(body, "application/json", status.HTTP_200_OK)

    @extend_schema(
        tags=["Populate"],
        summary="가짜 사용자 생성",
        description="`number`(1~100)명의 가짜 사용자를 생성해 인덱스에 순차 색인합니다. 인덱스가 없으면 먼저 생성합니다.",
        operation_id="populate_users",
        parameters=[OpenApiParameter(name="number", location=OpenApiParameter.PATH, required=True, type=OpenApiTypes.INT, description="생성 수 (1~100)")],
        responses={
            200: OpenApiResponse(response=OpenApiTypes.STR, description="`Populated!`"),
            400: OpenApiResponse(response=OpenApiTypes.STR, description="`ERROR: bad value` 또는 엔진 오류 텍스트"),
        },
    )
    def populate(self, request, number=None):
        params = PopulateIn(data={"number": number})
        if not params.is_valid():
            log.error("ERROR: bad value")
            return send(BAD_VALUE_MESSAGE, "text/plain", status.HTTP_400_BAD_REQUEST)

        try:
            services.populate(params.validated_data["number"])
        except EngineError as e:
            log.error("ERROR: [Request] %s", e)
            return send(str(e).encode(), "text/plain", status.HTTP_400_BAD_REQUEST)
        return send(POPULATED_MESSAGE, "text/plain", status.HTTP_200_OK)

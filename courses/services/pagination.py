from django.conf import settings
from django.core.paginator import EmptyPage, PageNotAnInteger, Paginator
from rest_framework.response import Response


def paginate_queryset_or_list(request, queryset_or_list, serializer_class=None, serializer_kwargs=None,
                              message="Records retrieved successfully."):
    """
    Paginate a queryset or list for custom API endpoints.

    Page and page size come from the ``page`` and ``page_size`` query
    parameters; the page size is capped at ``MAX_PAGE_SIZE``. Returns the
    standard envelope with pagination metadata:
        {
            "success": True,
            "data": [...],
            "message": "...",
            "count": total_count,
            "next": next_page_url or None,
            "previous": previous_page_url or None,
            "page_size": page_size,
            "current_page": current_page,
            "total_pages": total_pages
        }
    """
    default_page_size = getattr(settings, 'DEFAULT_PAGE_SIZE', 20)
    max_page_size = getattr(settings, 'MAX_PAGE_SIZE', 100)

    try:
        page_number = int(request.query_params.get('page', 1))
    except (ValueError, TypeError):
        page_number = 1

    try:
        page_size = int(request.query_params.get('page_size', default_page_size))
        page_size = max(1, min(page_size, max_page_size))
    except (ValueError, TypeError):
        page_size = default_page_size

    paginator = Paginator(queryset_or_list, page_size)
    try:
        page = paginator.page(page_number)
    except PageNotAnInteger:
        page = paginator.page(1)
    except EmptyPage:
        page = paginator.page(paginator.num_pages)

    if serializer_class:
        serializer = serializer_class(page.object_list, many=True, **(serializer_kwargs or {}))
        data = serializer.data
    else:
        data = list(page.object_list)

    base_url = request.build_absolute_uri().split('?')[0]
    query_params = request.query_params.copy()

    next_url = None
    if page.has_next():
        query_params['page'] = page.next_page_number()
        next_url = f"{base_url}?{query_params.urlencode()}"

    previous_url = None
    if page.has_previous():
        query_params['page'] = page.previous_page_number()
        previous_url = f"{base_url}?{query_params.urlencode()}"

    return Response({
        "success": True,
        "data": data,
        "message": message,
        "count": paginator.count,
        "next": next_url,
        "previous": previous_url,
        "page_size": page_size,
        "current_page": page.number,
        "total_pages": paginator.num_pages
    })

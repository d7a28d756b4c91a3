from fastapi import APIRouter, Depends, HTTPException, status
from shorturl_app.dependencies import get_statistics_view
from shorturl_app.exceptions import NotFoundError
from shorturl_app.schemas.url import StatisticsResponse, URLStats
from shorturl_app.services.statistics import StatisticsView

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsResponse)
async def get_all_statistics(
    statistics: StatisticsView = Depends(get_statistics_view)
):
    """Statistics for every short URL ever created, newest first"""
    urls = [URLStats.from_snapshot(snapshot) for snapshot in statistics.get_all()]
    return StatisticsResponse(totalUrls=len(urls), urls=urls)


@router.get("/{shortcode}", response_model=URLStats)
async def get_url_statistics(
    shortcode: str,
    statistics: StatisticsView = Depends(get_statistics_view)
):
    """Statistics for one short URL (expired ones included)"""
    try:
        snapshot = statistics.get_one(shortcode)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return URLStats.from_snapshot(snapshot)

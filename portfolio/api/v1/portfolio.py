# portfolio/api/v1/portfolio.py
from fastapi import APIRouter, Depends

from portfolio.api.response import success_response
from portfolio.services import PortfolioService, get_portfolio_service

router = APIRouter()


@router.get("/portfolio")
async def get_portfolio_data(service: PortfolioService = Depends(get_portfolio_service)):
    """
    Full portfolio in one response.

    Always 200: sections whose read failed come back empty.
    """
    data = await service.get_portfolio_data()
    return success_response("Portfolio data retrieved successfully", data)

"""API endpoints for delivery charge calculation."""

import logging

from fastapi import APIRouter, HTTPException, Depends

from app.models import (
    ChargeQuote,
    ChargeResponse,
    Delivery,
    DeliveryRequest,
    RateTier,
    StrategyRequest
)
from app.services import (
    ChargeCalculator,
    StrategyNotSetError,
    available_zones,
    get_charge_calculator,
    get_rate_strategy
)
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Delivery Charges"])


def get_calculator() -> ChargeCalculator:
    """
    Dependency injection for the charge calculator.
    Tests override this to supply their own calculator.
    """
    return get_charge_calculator()


def _active_zone(calculator: ChargeCalculator):
    strategy = calculator.strategy
    return getattr(strategy, "zone", None) if strategy is not None else None


@router.get("/rate-tiers")
async def get_rate_tiers(calculator: ChargeCalculator = Depends(get_calculator)):
    """
    List the available rate tiers and the tier currently in use.
    """
    tiers = []
    for zone in available_zones():
        strategy = get_rate_strategy(zone)
        tiers.append(RateTier(
            zone=zone,
            multiplier=strategy.multiplier,
            strategy=strategy.__class__.__name__
        ))

    return {
        "tiers": tiers,
        "active_zone": _active_zone(calculator),
        "max_deliveries_per_request": settings.MAX_DELIVERIES_PER_REQUEST
    }


@router.put("/strategy")
async def set_strategy(
    request: StrategyRequest,
    calculator: ChargeCalculator = Depends(get_calculator)
):
    """
    Switch the calculator to the rate strategy of the given tier.
    """
    strategy = get_rate_strategy(request.zone)
    calculator.set_strategy(strategy)

    return {
        "active_zone": request.zone,
        "multiplier": strategy.multiplier,
        "message": f"Rate strategy set to {strategy.__class__.__name__}"
    }


@router.post("/calculate-charge", response_model=ChargeQuote)
async def calculate_charge(
    delivery: Delivery,
    calculator: ChargeCalculator = Depends(get_calculator)
) -> ChargeQuote:
    """
    Calculate the charge for one delivery with the active strategy.

    Raises:
        HTTPException: 409 if no strategy has been set
    """
    try:
        charge = calculator.calculate_charge(delivery.distance)
    except StrategyNotSetError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Charge calculation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")

    return ChargeQuote(
        zone=_active_zone(calculator),
        distance=delivery.distance,
        charge=charge
    )


@router.post("/calculate-charges", response_model=ChargeResponse)
async def calculate_charges(
    request: DeliveryRequest,
    calculator: ChargeCalculator = Depends(get_calculator)
) -> ChargeResponse:
    """
    Calculate charges for a list of deliveries.

    Args:
        request: Delivery request containing list of deliveries
        calculator: Injected charge calculator

    Returns:
        ChargeResponse with calculated charges and total

    Raises:
        HTTPException: If validation fails or no strategy is set
    """
    if len(request.deliveries) > settings.MAX_DELIVERIES_PER_REQUEST:
        raise HTTPException(
            status_code=422,
            detail=f"Maximum {settings.MAX_DELIVERIES_PER_REQUEST} deliveries allowed per request"
        )

    try:
        return calculator.calculate_all_charges(request.deliveries)
    except StrategyNotSetError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Charge calculation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@router.get("/health")
async def health_check(calculator: ChargeCalculator = Depends(get_calculator)):
    """Health check endpoint including calculator status."""
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "strategy_set": calculator.has_strategy(),
        "active_zone": _active_zone(calculator)
    }

"""Discount calculation API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.exceptions import (
    CodeValidationError,
    DiscountCalculationError,
    PricingValidationError,
)
from ..models.discount import DiscountedPrice
from ..models.requests import (
    CalculateDiscountRequest,
    ValidateCodeRequest,
    ValidateCodeResponse,
)
from ..services.pricing import DiscountService
from .dependencies import get_discount_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/discounts", tags=["Discounts"])


@router.post("/calculate", response_model=DiscountedPrice)
async def calculate_discounts(
    request: CalculateDiscountRequest,
    service: DiscountService = Depends(get_discount_service),
):
    """
    Price a cart.

    Brand and category discounts are always considered. The voucher and
    bank offer stages only run when a code or a paying bank is supplied.
    """
    try:
        result = service.calculate_cart_discounts(
            cart_items=request.cart_items,
            customer=request.customer,
            discount_code=request.discount_code,
            payment_info=request.payment_info,
        )
    except PricingValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DiscountCalculationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        f"Priced cart for customer {request.customer.id}: "
        f"{result.original_price} -> {result.final_price}"
    )
    return result


@router.post("/validate", response_model=ValidateCodeResponse)
async def validate_code(
    request: ValidateCodeRequest,
    service: DiscountService = Depends(get_discount_service),
):
    """Check whether a discount code can be used on a cart"""
    try:
        valid = service.validate_discount_code(
            request.code,
            request.cart_items,
            request.customer,
        )
    except PricingValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CodeValidationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ValidateCodeResponse(code=request.code, valid=valid)

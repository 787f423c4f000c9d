"""Discount rule API routes"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Response

from ..core.exceptions import DuplicateRuleNameError
from ..database.rules import rule_db
from ..models.discount import DiscountRule, DiscountType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rules", tags=["Rules"])


@router.get("", response_model=list[DiscountRule])
async def list_active_rules(
    type: Optional[DiscountType] = Query(None, description="Filter by discount type"),
):
    """List rules that are usable right now"""
    if type is not None:
        return rule_db.find_by_type(type)
    return rule_db.find_all_active()


@router.get("/{rule_id}", response_model=DiscountRule)
async def get_rule(rule_id: str):
    """Get a rule by ID, whether or not it is currently active"""
    rule = rule_db.get_rule(rule_id)
    if not rule:
        raise HTTPException(status_code=404, detail="Rule not found")
    return rule


@router.post("", response_model=DiscountRule, status_code=201)
async def create_rule(rule: DiscountRule):
    """Add a rule, or replace the rule with the same ID"""
    try:
        saved = rule_db.save(rule)
    except DuplicateRuleNameError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info(f"Saved discount rule {saved.name} ({saved.id})")
    return saved


@router.delete("/{rule_id}", status_code=204)
async def delete_rule(rule_id: str):
    """Delete a rule"""
    if not rule_db.delete_by_id(rule_id):
        raise HTTPException(status_code=404, detail="Rule not found")
    logger.info(f"Deleted discount rule {rule_id}")
    return Response(status_code=204)

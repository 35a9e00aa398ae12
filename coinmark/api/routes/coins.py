"""Coin list, summary and collected toggle."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from coinmark.api.state import AppState, get_state
from coinmark.core.coin_store import StoreError, coin_to_dict

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
def list_coins(missing_only: bool = False, state: AppState = Depends(get_state)):
    """List coins sorted by series, year and name; optionally only missing ones."""
    view = state.list_view(missing_only=missing_only)
    return [coin_to_dict(c) for c in view.rows()]


@router.get("/summary")
def collection_summary(state: AppState = Depends(get_state)):
    """Collected and missing counts, overall and per series."""
    summary = state.list_view().summary()
    return {
        "total": summary.total,
        "collected": summary.collected,
        "missing": summary.missing,
        "series": {
            name: {"total": s.total, "collected": s.collected, "missing": s.missing}
            for name, s in summary.series.items()
        },
    }


@router.get("/{coin_id}")
def get_coin(coin_id: str, state: AppState = Depends(get_state)):
    try:
        coin = state.store.get(coin_id)
    except StoreError as e:
        logger.error("Coins: failed to read %s: %s", coin_id, e)
        raise HTTPException(status_code=503, detail="Coin collection unavailable")
    if coin is None:
        raise HTTPException(status_code=404, detail="Coin not found")
    return coin_to_dict(coin)


@router.post("/{coin_id}/toggle")
def toggle_coin(coin_id: str, state: AppState = Depends(get_state)):
    """Flip the collected flag of one coin."""
    try:
        coin = state.store.toggle_collected(coin_id)
    except StoreError as e:
        logger.error("Coins: failed to toggle %s: %s", coin_id, e)
        raise HTTPException(status_code=503, detail="Coin collection unavailable")
    if coin is None:
        raise HTTPException(status_code=404, detail="Coin not found")
    return coin_to_dict(coin)

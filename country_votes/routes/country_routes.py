import logging
from fastapi import APIRouter, Depends
from typing import Any, List

from ..aggregation import count_by_country, enrich, select_top
from ..config import TOP_N
from ..country_api import CountryClient
from ..dependencies import get_country_client, get_vote_store
from ..models.country_model import Country
from ..storage import VoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["Countries"])


@router.get("")
def get_countries_list(api: CountryClient = Depends(get_country_client)) -> List[Any]:
    return api.fetch_all()


@router.get("/details", response_model=List[Country])
def get_countries_details(api: CountryClient = Depends(get_country_client)):
    return api.fetch_details()


@router.get("/names", response_model=List[str])
def get_countries_names(api: CountryClient = Depends(get_country_client)):
    return api.fetch_names()


@router.get("/votes")
def get_countries_by_votes(
    api: CountryClient = Depends(get_country_client),
    store: VoteStore = Depends(get_vote_store),
):
    """
    Top 10 most voted countries with their details.
    An upstream failure fails the whole request; no partial results.
    """
    countries = api.fetch_details()
    counts = count_by_country(store.read_all())
    top = select_top(enrich(counts, countries), TOP_N)
    logger.info(f"Leaderboard built from {sum(counts.values())} votes, {len(counts)} countries")
    return top

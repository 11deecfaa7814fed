# fetch.py
# Pulls a user's contribution calendar from GitHub and returns {date: count}.

import logging
import re
from datetime import date
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from dragon3d.errors import IngestionError

logger = logging.getLogger(__name__)

CONTRIBUTIONS_URL = "https://github.com/users/{username}/contributions"
USER_AGENT = "dragon3d-contribution-graph"
TIMEOUT = 15

COUNT_RE = re.compile(r"([\d,]+)\s+contributions?", re.IGNORECASE)


def fetch_contributions(username, start, end, session=None):
    http = session or requests
    url = CONTRIBUTIONS_URL.format(username=quote(username, safe=""))
    params = {"from": start.isoformat(), "to": end.isoformat()}
    try:
        r = http.get(url, params=params, headers={"User-Agent": USER_AGENT}, timeout=TIMEOUT)
    except requests.RequestException as exc:
        raise IngestionError(f"Failed to fetch {url}: {exc}") from exc
    if r.status_code != 200:
        raise IngestionError(f"Failed to fetch {url} (status {r.status_code})")

    counts = parse_calendar(r.text)
    if not counts:
        raise IngestionError("No contribution data parsed")
    logger.info("Parsed %d contribution days for %s", len(counts), username)
    return counts


def parse_calendar(html):
    soup = BeautifulSoup(html, "html.parser")
    counts = _parse_tooltips(soup)
    if not counts:
        # fallback to the older svg markup
        counts = _parse_rects(soup)
    return counts


def _parse_tooltips(soup):
    # cells carry the date, tooltips (linked by id) carry the count
    date_by_cell = {}
    for td in soup.find_all("td"):
        cell_id = td.get("id")
        day = td.get("data-date")
        if cell_id and day:
            date_by_cell[cell_id] = day

    counts = {}
    for tip in soup.find_all("tool-tip"):
        day = date_by_cell.get(tip.get("for"))
        if not day:
            continue
        text = tip.get_text(" ", strip=True)
        if "No contributions" in text:
            counts[_to_date(day)] = 0
            continue
        m = COUNT_RE.search(text)
        if m:
            counts[_to_date(day)] = int(m.group(1).replace(",", ""))
    return counts


def _parse_rects(soup):
    rects = soup.find_all("rect", {"class": "ContributionCalendar-day"})
    if not rects:
        rects = soup.find_all("rect", {"class": "day"})
    counts = {}
    for rect in rects:
        day = rect.get("data-date")
        count = rect.get("data-count")
        if day is None or count is None:
            continue
        counts[_to_date(day)] = int(count)
    return counts


def _to_date(value):
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise IngestionError(f"Unparseable date {value!r} in contribution calendar") from exc

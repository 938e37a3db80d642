# scraping/hep_scraper.py
from bs4 import BeautifulSoup
import requests

from .outage_parser import extract_outages

BASE_URL = "https://www.hep.hr/ods/bez-struje/19"
DATE_FORMAT = "%d.%m.%Y"
HIDDEN_TAGS = ["script", "style", "noscript", "template"]


def fetch_page(date, region_id, office_id, base_url=BASE_URL, session=None, timeout=30):
    """Fetch the outage page for one date (DD.MM.YYYY). Raises requests.RequestException."""
    headers = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    }
    params = {"dp": region_id, "el": office_id, "datum": date}
    http = session or requests
    r = http.get(base_url, params=params, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.text


def source_url(region_id, office_id, base_url=BASE_URL):
    return f"{base_url}?dp={region_id}&el={office_id}"


def norm_text(t):
    return " ".join(t.split())


def flatten_page(html, heading_tag="h3"):
    """
    Reduce the page to (heading, lines).

    heading is the text of the first `heading_tag` element ("" if missing).
    lines are the visible text nodes joined in document order, split on
    newlines and stripped.
    """
    soup = BeautifulSoup(html or "", "lxml")

    heading_el = soup.find(heading_tag)
    # whitespace is collapsed, so the date label is not the raw heading text
    heading = norm_text(heading_el.get_text()) if heading_el else ""

    for el in soup.find_all(HIDDEN_TAGS):
        el.decompose()

    text = soup.get_text(" ")
    return heading, [line.strip() for line in text.split("\n")]


def parse_outages(html, heading_tag="h3"):
    heading, lines = flatten_page(html, heading_tag=heading_tag)
    return extract_outages(heading, lines)

"""Pytest fixtures and fake HTTP plumbing for the scraper tests."""

import pytest

from scraper import TradeAPlaneScraper


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session.

    ``responses`` maps a URL to a FakeResponse, an exception to raise, or a
    list of those consumed one per request. Unknown URLs get a 404.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.headers = {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        resp = self.responses.get(url)
        if isinstance(resp, list):
            resp = resp.pop(0)
        if resp is None:
            return FakeResponse(404, "")
        if isinstance(resp, Exception):
            raise resp
        return resp


def listing_html(listing_id="2401", title="2015 Cessna 172S Skyhawk SP", make="CESSNA",
                 model="172S+SKYHAWK+SP", category="Single+Engine+Piston"):
    return f"""
    <div class="result_listing" data-listing_id="{listing_id}"
         data-model_group=" CESSNA 172 SERIES " data-seller_id="77">
      <div class="lst-title">
        <h3><a href="/search?category_level1={category}&make={make}&model={model}&listing_id={listing_id}&s-type=aircraft&s-lvl=2">{title}</a></h3>
      </div>
      <p class="txt-price"> $389,000 </p>
      <p class="txt-reg-num">Reg# N{listing_id}AB</p>
      <p class="txt-total-time">TT: 1,250</p>
      <p class="address">
        Wichita, KS
      </p>
      <p class="last-update">Last Update: 10/01/2026</p>
    </div>
    """


def search_page(listing_ids, heading=None):
    """A search results page holding one listing block per id."""
    heading_html = ""
    if heading is not None:
        heading_html = f'<div class="search_options"><h2>\n  {heading}\n</h2></div>'
    listings = "".join(listing_html(listing_id=str(i)) for i in listing_ids)
    return f"""
    <html><body>
      <div id="search_results_area">
        {heading_html}
        {listings}
      </div>
    </body></html>
    """


DETAIL_PAGE = """
<html><body>
  <div id="bottom_section">
    <div id="general_specs"><p>
      Year: 2015 Make: Cessna
    </p></div>
  </div>
  <div id="detailed_desc"><pre>  One owner, hangared.  </pre></div>
  <div id="avionics_equipment"><pre>Garmin G1000</pre></div>
  <div id="airframe"><pre>No damage history</pre></div>
  <div id="engines_mods"><pre>Lycoming IO-360, 450 SMOH</pre></div>
  <div id="interior_exterior"><pre>Leather seats</pre></div>
</body></html>
"""


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def scraper(fake_session):
    """Scraper that never sleeps and talks to a FakeSession."""
    return TradeAPlaneScraper(session=fake_session, retry_delay=0)

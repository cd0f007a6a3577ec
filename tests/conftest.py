"""Pytest configuration and shared fixtures."""

import pytest

GAME_SYSTEM_XML = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<gameSystem id="sys-40k" revision="12" battleScribeVersion="2.03" name="Warhammer 40,000" authorName="BSData" authorContact="@BSData" authorUrl="https://github.com/BSData" xmlns="http://www.battlescribe.net/schema/gameSystemSchema">
  <costTypes>
    <costType id="points" name="pts" defaultCostLimit="-1.0"/>
  </costTypes>
</gameSystem>
"""

CATALOGUE_XML = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<catalogue id="abc" gameSystemId="sys1" battleScribeVersion="2.0" revision="3" name="Orks" authorName="A" authorContact="a@x" authorUrl="http://x" xmlns="http://www.battlescribe.net/schema/catalogueSchema">
  <entries>
    <entry id="boyz" name="Boyz" points="9.0"/>
  </entries>
</catalogue>
"""

ROSTER_XML = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<roster battleScribeVersion="2.03" description="Waaagh!" name="Speed Freeks" points="985.0" pointsLimit="1000.0" gameSystemId="sys-40k" gameSystemName="Warhammer 40,000" gameSystemRevision="12" xmlns="http://www.battlescribe.net/schema/rosterSchema">
  <forces/>
</roster>
"""

ROSTER_WITHOUT_POINTS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<roster battleScribeVersion="2.03" description="" name="Broken" pointsLimit="1000.0" gameSystemId="sys-40k"/>
"""


@pytest.fixture
def game_system_xml() -> bytes:
    """Return a valid game system document."""
    return GAME_SYSTEM_XML


@pytest.fixture
def catalogue_xml() -> bytes:
    """Return a valid catalogue document."""
    return CATALOGUE_XML


@pytest.fixture
def roster_xml() -> bytes:
    """Return a valid roster document with the optional game system fields."""
    return ROSTER_XML


@pytest.fixture
def broken_roster_xml() -> bytes:
    """Return a roster document missing the required points attribute."""
    return ROSTER_WITHOUT_POINTS_XML


@pytest.fixture
def data_files() -> dict[str, bytes]:
    """Return a small raw repository snapshot."""
    return {
        "wh40k.gst": GAME_SYSTEM_XML,
        "catalogues/orks.cat": CATALOGUE_XML,
        "rosters/speed_freeks.ros": ROSTER_XML,
        "README.md": b"# Warhammer 40,000 data\n",
    }

import pytest


@pytest.fixture
def eddm_metar_text() -> str:
    """A short automatic report with CAVOK and a NOSIG trend."""
    return "EDDM 222020Z AUTO VRB01KT CAVOK 20/13 Q1017 NOSIG"


@pytest.fixture
def masked_metar_text() -> str:
    """A report where every maskable group is slashed out."""
    return "ETSB 032220Z AUTO /////KT //// // ////// ///// Q//// ///"


@pytest.fixture
def metar_feed() -> str:
    """Several reports, one per line, as served by a bulletin endpoint."""
    return (
        "EDDM 222020Z AUTO VRB01KT CAVOK 20/13 Q1017 NOSIG\n"
        "EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015\n"
        "NOT A METAR\n"
        "\n"
        "ETSN 242120Z 30004KT 9999 FEW330 19/12 Q1016 BLU+\n"
    )

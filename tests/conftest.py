"""Pytest fixtures for slakit tests (model, parse/write, editing, CLI)."""

from pathlib import Path

import pytest

from slakit.core import Document
from slakit.sla import load

# ============================================================================
# SAMPLE DOCUMENT
# ============================================================================
# Page objects:
#   [0] text frame "Hello", first frame of a linked chain, unknown attribute
#   [1] picture frame
#   [2] polygon (neither text nor picture)
#   [3] text frame, second frame of the chain: two paragraphs, bullet, tab
# Plus a <Plugin> element no element class declares.

SAMPLE_SLA = """<?xml version="1.0" encoding="UTF-8"?>
<SCRIBUSUTF8NEW Version="1.5.8">
 <DOCUMENT ANZPAGES="1" PAGEWIDTH="595.275590551181" PAGEHEIGHT="841.889763779528" UNITS="0" DFONT="Arial Regular" DSIZE="12" FutureFlag="yes">
  <COLOR NAME="Black" SPACE="CMYK" CMYK="#000000ff"/>
  <COLOR NAME="Registration" SPACE="CMYK" CMYK="#ffffffff" Register="1"/>
  <LAYERS NUMMER="0" LEVEL="0" NAME="Background" SICHTBAR="1" DRUCKEN="1"/>
  <MASTERPAGE PAGEXPOS="100.00009" PAGEYPOS="20" PAGEWIDTH="595.275590551181" PAGEHEIGHT="841.889763779528" NUM="0" NAM="Normal"/>
  <PAGE PAGEXPOS="100.00009" PAGEYPOS="20" PAGEWIDTH="595.275590551181" PAGEHEIGHT="841.889763779528" NUM="0" MNAM="Normal"/>
  <PAGEOBJECT XPOS="120" YPOS="40" OwnPage="0" ItemID="100000001" PTYPE="4" WIDTH="200" HEIGHT="50" LAYER="0" NEXTITEM="100000004" BACKITEM="-1" CustomFlag="keep">
   <StoryText>
    <DefaultStyle PARENT="Default Paragraph Style"/>
    <ITEXT CPARENT="Default Character Style" FONT="Arial Regular" CH="Hello"/>
    <trail/>
   </StoryText>
  </PAGEOBJECT>
  <PAGEOBJECT XPOS="120" YPOS="300" OwnPage="0" ItemID="100000002" PTYPE="2" WIDTH="300" HEIGHT="200" PFILE="images/photo.jpg" LOCALSCX="1" LOCALSCY="1" LAYER="0" NEXTITEM="-1" BACKITEM="-1"/>
  <PAGEOBJECT XPOS="50.5" YPOS="60.25" OwnPage="0" ItemID="100000003" PTYPE="6" WIDTH="10" HEIGHT="10" LAYER="0" NEXTITEM="-1" BACKITEM="-1"/>
  <PAGEOBJECT XPOS="120" YPOS="100" OwnPage="0" ItemID="100000004" PTYPE="4" WIDTH="200" HEIGHT="50" LAYER="0" NEXTITEM="-1" BACKITEM="100000001">
   <StoryText>
    <DefaultStyle/>
    <ITEXT CPARENT="Heading" CH="First"/>
    <para Bullet="1" BulletStr="■"/>
    <ITEXT CH="Second"/>
    <tab/>
    <ITEXT CH="part"/>
    <para/>
    <trail ALIGN="1"/>
   </StoryText>
  </PAGEOBJECT>
  <Plugin name="future">payload</Plugin>
 </DOCUMENT>
</SCRIBUSUTF8NEW>
"""


@pytest.fixture
def sample_sla_bytes() -> bytes:
    """Raw bytes of the sample document."""
    return SAMPLE_SLA.encode("utf-8")


@pytest.fixture
def sla_path(tmp_path, sample_sla_bytes) -> Path:
    """Sample document written to a temporary .sla file."""
    path = tmp_path / "flyer.sla"
    path.write_bytes(sample_sla_bytes)
    return path


@pytest.fixture
def document(sla_path) -> Document:
    """Sample document, parsed with default settings."""
    return load(sla_path)

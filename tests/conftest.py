"""Test setup for atlas2html."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


TAXONOMY_XML = """<?xml version="1.0" encoding="utf-8"?>
<taxonomies>
  <taxonomy>
    <taxonomy_name>World</taxonomy_name>
    <node atlas_node_id="355064" ethyl_content_object_id="82534" geo_id="355064">
      <node_name>Africa</node_name>
      <node atlas_node_id="355611" ethyl_content_object_id="3210" geo_id="355611">
        <node_name>South Africa</node_name>
        <node atlas_node_id="355612" ethyl_content_object_id="35474" geo_id="355612">
          <node_name>Cape Town</node_name>
          <node atlas_node_id="355613" ethyl_content_object_id="" geo_id="355613">
            <node_name>Table Mountain National Park</node_name>
          </node>
        </node>
      </node>
      <node atlas_node_id="355614">
        <node_name>Sudan</node_name>
      </node>
    </node>
  </taxonomy>
</taxonomies>
"""

DESTINATIONS_XML = """<?xml version="1.0" encoding="utf-8"?>
<destinations>
  <destination atlas_id="355064" title="Africa">
    <introductory>
      <introduction>
        <overview><![CDATA[Africa is big.]]></overview>
      </introduction>
    </introductory>
    <practical_information>
      <money>
        <money><![CDATA[Bring cash.]]></money>
      </money>
    </practical_information>
  </destination>
  <destination atlas_id="355612" title="Cape Town">
    <introductory>
      <introduction>
        <overview><![CDATA[Cape Town sits below Table Mountain.]]></overview>
      </introduction>
    </introductory>
  </destination>
  <destination title="No id">
    <overview><![CDATA[Never indexed.]]></overview>
  </destination>
</destinations>
"""


@pytest.fixture
def taxonomy_file(tmp_path: Path) -> Path:
    path = tmp_path / "taxonomy.xml"
    path.write_text(TAXONOMY_XML, encoding="utf-8")
    return path


@pytest.fixture
def destinations_file(tmp_path: Path) -> Path:
    path = tmp_path / "destinations.xml"
    path.write_text(DESTINATIONS_XML, encoding="utf-8")
    return path

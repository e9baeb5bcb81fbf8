"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of lcovbridge modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("lcovbridge"):
        del sys.modules[module_name]


EXPLORE_ME_LCOV = """SF:com/example/ExploreMe.java
FN:2,exploreMe
FNDA:1,exploreMe
FNF:1
FNH:1
DA:3,1
DA:4,0
DA:5,1
DA:6,1
LF:4
LH:3
BRDA:5,0,0,1
BRDA:5,0,1,-
BRF:2
BRH:1
end_of_record
"""

EXPLORE_ME_JACOCO = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<!DOCTYPE report PUBLIC "-//JACOCO//DTD Report 1.1//EN" "report.dtd">
<report name="gradle">
    <package name="com/example">
        <class name="com/example/ExploreMe" sourcefilename="ExploreMe.java">
            <method line="3" name="&lt;init&gt;">
                <counter covered="1" missed="0" type="LINE"/>
                <counter covered="1" missed="0" type="METHOD"/>
            </method>
            <method line="5" name="exploreMe">
                <counter covered="3" missed="3" type="BRANCH"/>
                <counter covered="4" missed="2" type="LINE"/>
                <counter covered="1" missed="0" type="METHOD"/>
            </method>
            <counter covered="3" missed="3" type="BRANCH"/>
            <counter covered="5" missed="2" type="LINE"/>
            <counter covered="2" missed="0" type="METHOD"/>
        </class>
        <sourcefile name="ExploreMe.java">
            <line cb="0" ci="3" mb="0" mi="0" nr="3"/>
            <line cb="1" ci="2" mb="1" mi="0" nr="5"/>
            <line cb="2" ci="3" mb="0" mi="0" nr="6"/>
            <line cb="0" ci="5" mb="0" mi="0" nr="7"/>
            <line cb="0" ci="0" mb="2" mi="3" nr="10"/>
            <line cb="0" ci="0" mb="0" mi="5" nr="11"/>
            <line cb="0" ci="1" mb="0" mi="0" nr="14"/>
            <counter covered="3" missed="3" type="BRANCH"/>
            <counter covered="5" missed="2" type="LINE"/>
            <counter covered="2" missed="0" type="METHOD"/>
        </sourcefile>
        <counter covered="3" missed="3" type="BRANCH"/>
        <counter covered="5" missed="2" type="LINE"/>
        <counter covered="2" missed="0" type="METHOD"/>
    </package>
</report>
"""


@pytest.fixture
def explore_me_lcov() -> str:
    return EXPLORE_ME_LCOV


@pytest.fixture
def explore_me_jacoco() -> bytes:
    return EXPLORE_ME_JACOCO.encode()

import pytest

from algo_katas.compass import CompassPoint, compass_table, create_compass_points


def test_compass_has_32_points_in_11_25_steps():
    pts = create_compass_points()
    assert len(pts) == 32
    for i, p in enumerate(pts):
        assert p.azimuth == pytest.approx(i * 11.25)


def test_cardinals_land_on_quarter_turns():
    pts = create_compass_points()
    assert pts[0] == CompassPoint("N", 0.0)
    assert pts[8] == CompassPoint("E", 90.0)
    assert pts[16] == CompassPoint("S", 180.0)
    assert pts[24] == CompassPoint("W", 270.0)


def test_by_points_and_intercardinals():
    names = [p.abbreviation for p in create_compass_points()]
    assert names[:8] == ["N", "NbE", "NNE", "NEbN", "NE", "NEbE", "ENE", "EbN"]
    assert names[12] == "SE"
    assert names[22] == "WSW"
    assert names[27] == "NWbW"
    assert names[-1] == "NbW"
    assert len(set(names)) == 32


def test_compass_table_frame():
    df = compass_table()
    assert list(df.columns) == ["abbreviation", "azimuth"]
    assert len(df) == 32
    assert df.loc[31, "azimuth"] == pytest.approx(348.75)
    assert create_compass_points()[1].to_dict() == {"abbreviation": "NbE", "azimuth": 11.25}

"""
Great Circle Core - Quick Start Example

Airport-to-airport great circle calculations
"""
from greatcircle_core import (
    Coordinate,
    GreatCircle,
    configure_logging,
)


def main():
    configure_logging()

    print("=" * 60)
    print("Great Circle Core - Quick Start")
    print("=" * 60)

    # 1. 초기화
    great_circle = GreatCircle()
    ist = Coordinate(41.28111111, 28.75333333)        # Istanbul Airport
    jfk = Coordinate.from_string("40.63980103, -73.77890015")  # New York JFK
    fco = Coordinate(41.8002778, 12.2388889)          # Roma Fiumicino
    sfo = Coordinate(37.615223, -122.389977)          # San Francisco SFO

    # 2. 거리 / 방위
    print(f"\n[IST ({ist}) -> JFK ({jfk})]")
    print(f"Distance:      {great_circle.distance(ist, jfk):.2f} km")
    print(f"Distance:      {great_circle.distance_in_nm(ist, jfk):.2f} NM")
    print(f"Bearing:       {great_circle.bearing(ist, jfk):.2f}°")
    print(f"Final bearing: {great_circle.final_bearing(ist, jfk):.2f}°")
    print(f"Midpoint:      {great_circle.midpoint(ist, jfk)}")
    print(f"Quarter way:   {great_circle.intermediate(ist, jfk, 0.25)}")
    print(f"1000 km out:   {great_circle.destination(ist, great_circle.bearing(ist, jfk), 1000.0)}")

    # 3. 항로 교차
    print("\n[Intersections]")
    for fco_bearing in (45.0, 90.0):
        crossing = great_circle.intersection(ist, 270.0, fco, fco_bearing)
        label = crossing if crossing is not None else "no intersection"
        print(f"IST@270° x FCO@{fco_bearing:.0f}°: {label}")

    # 4. 항로 이탈
    print("\n[FCO relative to IST -> JFK]")
    print(f"Cross-track: {great_circle.cross_track_distance(fco, ist, jfk):.1f} km")
    print(f"Along-track: {great_circle.along_track_distance_to(fco, ist, jfk):.1f} km")

    # 5. 최대 위도 / 위도선 교차
    print("\n[Latitudes]")
    print(f"Max latitude IST@270°: {great_circle.max_latitude(ist, 270.0):.2f}°")
    for latitude in (80.0, 70.0):
        crossings = great_circle.crossing_parallels(ist, sfo, latitude)
        if crossings:
            print(f"IST -> SFO crosses {latitude:.0f}°N at {crossings.first:.2f}°, {crossings.second:.2f}°")
        else:
            print(f"IST -> SFO never reaches {latitude:.0f}°N")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()

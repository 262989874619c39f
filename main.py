from autogis_geometry import GeometryError, Polygon


def main() -> int:
    try:
        polygon = Polygon([[[0.0, 0.0], [0.0, 1.0], [1.0, 1.0]]])
    except GeometryError as e:
        print(f"Error: {e}")
        return 1

    print(polygon)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

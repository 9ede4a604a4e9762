from hexgrids import ORIGIN, CartesianPoint, Cube, CubeDirection, HexGrid, LayoutSettings

layout = LayoutSettings(orientation="pointy", origin_x=200, origin_y=150, size_x=20, size_y=20).to_layout()
center = ORIGIN
terrain = HexGrid.filled(center.spiral(3), lambda c: "road" if c.distance(center) % 2 else "grass")

clicks = [CartesianPoint(200.0, 150.0), CartesianPoint(251.0, 133.0), CartesianPoint(140.0, 212.0)]


if __name__ == "__main__":
    for click in clicks:
        cell = Cube.from_cartesian(click, layout)
        print(f"{click} -> {cell} ({terrain.get(cell, 'off map')})")
    print("ring 2:", [c.as_tuple() for c in center.ring(2)])
    print("30 degree neighbour:", center.neighbor(CubeDirection.D30))

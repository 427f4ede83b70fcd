from evolving_organisms.simulation import Body, BodySquare


def origin_body():
    body = Body()
    body.add_square(BodySquare(0.0, 0.0))
    return body


def test_adjacent_square_is_valid():
    body = origin_body()
    assert body.check_blueprint_validity([BodySquare(1.0, 0.0)])


def test_distant_square_is_invalid():
    body = origin_body()
    assert not body.check_blueprint_validity([BodySquare(2.0, 0.0)])


def test_diagonal_counts_as_adjacent():
    body = origin_body()
    assert body.check_blueprint_validity([BodySquare(1.0, 1.0)])


def test_threshold_is_strict():
    body = origin_body()
    assert body.check_blueprint_validity([BodySquare(1.49, 0.0)])
    assert not body.check_blueprint_validity([BodySquare(1.5, 0.0)])


def test_empty_proposal_is_valid():
    assert origin_body().check_blueprint_validity([])
    assert Body().check_blueprint_validity([])


def test_empty_body_rejects_any_square():
    assert not Body().check_blueprint_validity([BodySquare(0.0, 0.0)])


def test_one_bad_square_invalidates_proposal():
    body = Body.from_points([(0, 0), (1, 0)])
    proposal = [BodySquare(1.0, 1.0), BodySquare(5.0, 5.0)]
    assert not body.check_blueprint_validity(proposal)


def test_squares_compare_by_value():
    assert BodySquare(1.0, 2.0) == BodySquare(1.0, 2.0)
    assert Body.from_points([(0, 0), (1, 0)]) == Body.from_points([(0.0, 0.0), (1.0, 0.0)])


def test_copy_is_independent():
    body = Body.from_points([(0, 0)])
    clone = body.copy()
    clone.add_square(BodySquare(1.0, 0.0))
    assert len(body) == 1
    assert len(clone) == 2


def test_positions_keep_insertion_order():
    body = Body.from_points([(3, 4), (0, 0), (1, 2)])
    assert body.positions().tolist() == [[3.0, 4.0], [0.0, 0.0], [1.0, 2.0]]
    assert Body().positions().shape == (0, 2)

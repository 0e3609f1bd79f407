from pumpy_pills.client import parse_args


def test_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.assets is None
    assert not args.debug


def test_options():
    args = parse_args(["--seed", "9", "--assets", "sprites", "--debug"])
    assert args.seed == 9
    assert args.assets == "sprites"
    assert args.debug

from gdrivecore.registry import Option, OptionExample, RegInfo, register


def test_register_prints_announcement(capsys):
    register(RegInfo(name="drive", description="Google Drive"))
    assert capsys.readouterr().out == 'Registered backend "drive": Google Drive\n'


def test_register_quotes_name(capsys):
    register(RegInfo(name='a"b', description="desc"))
    assert capsys.readouterr().out == 'Registered backend "a\\"b": desc\n'


def test_option_defaults():
    option = Option(name="chunk_size")
    assert option.help == ""
    assert option.provider == ""
    assert option.default is None
    assert option.examples == []


def test_reginfo_holds_options_and_factory():
    def factory(name, root, config):
        return (name, root, config)

    info = RegInfo(
        name="drive",
        description="d",
        new_fs=factory,
        options=[Option(name="scope", examples=[OptionExample(value="drive", help="full")])],
    )
    assert info.new_fs("n", "r", None) == ("n", "r", None)
    assert info.options[0].examples[0].value == "drive"
    assert RegInfo(name="x").options == []
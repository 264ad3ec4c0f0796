"""Tests for the external maps link panel."""

from map_address_search.link_launcher import LinkLauncherController, build_maps_url


class TestBuildUrl:
    def test_address_is_percent_encoded(self):
        url = build_maps_url('1 Infinite Loop, Cupertino')
        assert url == 'http://maps.apple.com/?address=1%20Infinite%20Loop%2C%20Cupertino'

    def test_empty_address_still_builds_link(self):
        assert build_maps_url('') == 'http://maps.apple.com/?address='

    def test_reserved_characters_do_not_break_query(self):
        url = build_maps_url('A&B Street #4?')
        assert url.endswith('?address=A%26B%20Street%20%234%3F')

    def test_custom_base(self):
        assert build_maps_url('Paris', 'maps://') == 'maps://?address=Paris'


class TestController:
    def test_open_hands_url_to_platform(self, state):
        opened = []
        ctl = LinkLauncherController(state, lambda url: opened.append(url) or True)
        ctl.set_address('10 Downing Street')
        assert ctl.open() is True
        assert opened == ['http://maps.apple.com/?address=10%20Downing%20Street']
        assert state.address_to_open == '10 Downing Street'

    def test_refused_open_is_reported(self, state):
        ctl = LinkLauncherController(state, lambda url: False)
        ctl.set_address('anywhere')
        assert ctl.open() is False

    def test_base_url_can_change_at_runtime(self, state):
        ctl = LinkLauncherController(state, lambda url: True)
        ctl.base_url = 'https://maps.example.com/'
        ctl.set_address('Rome')
        assert ctl.url() == 'https://maps.example.com/?address=Rome'

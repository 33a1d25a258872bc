from config import Settings, load_settings


def test_defaults():
	assert load_settings({}) == Settings()


def test_from_environ():
	s = load_settings({
		"HOST": "0.0.0.0",
		"PORT": "9000",
		"DEBUG": "Yes",
		"MAX_QUERY_LENGTH": "128",
		"LOG_LEVEL": "debug",
	})
	assert s.host == "0.0.0.0"
	assert s.port == 9000
	assert s.debug is True
	assert s.max_query_length == 128
	assert s.log_level == "DEBUG"


def test_debug_false_values():
	assert load_settings({"DEBUG": "0"}).debug is False
	assert load_settings({"DEBUG": "off"}).debug is False

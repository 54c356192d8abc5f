def pytest_addoption(parser):
    # read straight from sys.argv by the suites to cut down hypothesis examples
    parser.addoption("--fast", action="store_true", default=False, help="run fewer hypothesis examples")

# tests/conftest.py
import pytest

import soupwalk

SAMPLE_HTML = """
<html>
  <head>
    <title>Sample "Hello, World" Application</title>
  </head>
  <body bgcolor=white>

    <table border="0" cellpadding="10">
      <tr>
        <td>
          <img src="images/springsource.png">
        </td>
        <td>
          <h1>Sample "Hello, World" Application</h1>
        </td>
      </tr>
    </table>
    <div id="0">
      <div id="1">Just two divs peacing out</div>
    </div>
    check
    <div id="2">One more</div>
    <p>This is the home page for the HelloWorld Web application. </p>
    <p>To prove that they work, you can execute either of the following links:
    <ul>
      <li>To a <a href="hello.jsp">JSP page</a> right?</li>
      <li>To a <a href="hello">servlet</a></li>
    </ul>
    </p>
    <div id="3">
      <div id="4">Last one</div>
    </div>
    <div id="5">
        <h1><span></span></h1>
    </div>
  </body>
</html>
"""

MULTIPLE_CLASSES_HTML = """
<html>
	<head>
		<title>Sample Application</title>
	</head>
	<body>
		<div class="first second">Multiple classes</div>
		<div class="first">Single class</div>
		<div class="second first third">Multiple classes inorder</div>
		<div>
			<div class="first">Inner single class</div>
			<div class="first second">Inner multiple classes</div>
			<div class="second first">Inner multiple classes inorder</div>
		</div>
	</body>
</html>
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a user's ~/.soupwalk/config.json out of the tests."""
    config_path = tmp_path / "config.json"
    monkeypatch.setenv("SOUPWALK_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def doc():
    root = soupwalk.parse(SAMPLE_HTML)
    assert root.error is None
    return root


@pytest.fixture
def multiple_classes():
    root = soupwalk.parse(MULTIPLE_CLASSES_HTML)
    assert root.error is None
    return root

import pytest

from extractors.contact_extractor import ContactExtractor


CONTACT_PAGE = """<!DOCTYPE html>
<html>
<head>
  <title>  Acme Widgets Inc  </title>
  <style>.footer::after { content: "styles@acme-cdn.com"; }</style>
  <script>window.tracker = {owner: "bot@tracking.io", hotline: "+49 30 1234 5678"};</script>
</head>
<body>
  <!-- legacy@acme.com +33 1 23 45 67 89 -->
  <svg viewBox="0 0 10 10"><title>Icon +61 2 9876 5432</title></svg>
  <header>
    <a href="mailto:sales@acme.com">sales@acme.com</a>
    <a href="tel:+15551234567">Call sales</a>
  </header>
  <main>
    <p>Support: support@acme.com or +1 (555) 987-6543</p>
    <p>Local line: 555-123-4567</p>
    <p>Sales again: sales@acme.com, +15551234567</p>
  </main>
  <footer>
    <a href="https://twitter.com/acmewidgets">Twitter</a>
    <a href="https://x.com/acme_support">X</a>
    <a href="https://twitter.com/acmewidgets/status/12345">Latest</a>
    <a href="https://www.linkedin.com/company/acme-widgets">LinkedIn</a>
    <a href="https://uk.linkedin.com/in/jane-doe_42">Jane</a>
    <a href="https://www.linkedin.com/company/acme-widgets/">LinkedIn again</a>
    <a href="https://www.linkedin.com/feed/">Feed</a>
  </footer>
</body>
</html>
"""


@pytest.fixture
def extractor():
    return ContactExtractor()


@pytest.fixture
def contact_page():
    return CONTACT_PAGE

"""
Pytest configuration and shared fixtures.
"""
import pytest


INVENTORY_PAGE = """
<html>
<head><title>Team Fortress 2 - Steam Card Exchange</title></head>
<body>
    <div class="inventory_gameinfo">
        <h2>
            Team Fortress 2
        </h2>
        <div class="inventory_totals">Total: <span class="credit_value"> 1240 </span></div>
    </div>
    <h1>Steam Card Exchange</h1>
    <div class="inventory_gamecards">
        <div class="inventory_gamecard">
            <img src="https://cdn.example.com/cards/scout.png" alt="Scout">
            <span class="inventory_gamecard_name"> Scout </span>
            <span class="credit_value">15</span>
        </div>
        <div class="inventory_gamecard">
            <img src="https://cdn.example.com/cards/heavy.png" alt="Heavy">
            <span class="inventory_gamecard_name">Heavy</span>
            <span class="credit_value">12</span>
        </div>
    </div>
</body>
</html>
"""


@pytest.fixture
def inventory_page() -> str:
    """A well-formed inventory page with a title, a total and two cards."""
    return INVENTORY_PAGE

"""
Example localized data for demos and tests.

Mirrors the usual "message of the day" page: a greeting string and a
nested map of nonces the page's forms post back.
"""
from localize.container import LocalizeMap


MOTD_BODY = """<div class="page">
<h1>The message of the day is: <span class="motd"></span></h1>
</div>
<script type="text/javascript">
window.onload = function() {
    document.querySelector(".page .motd").innerText = _localData.motd[0];
};
</script>"""


def build_example_map(motd: str = "Hello world, welcome to a new day!") -> LocalizeMap:
    return LocalizeMap(
        "_localData",
        {
            "motd": motd,
            "nonce": {
                "login": "LaKJIIjIOUhjbKHdBJHGkhg",
            },
        },
    )

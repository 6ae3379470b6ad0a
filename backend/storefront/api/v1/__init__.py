from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import contact_submissions
from . import content
from . import hero_sections
from . import homepage_content
from . import menus
from . import navbar
from . import selections
from . import product_requests
from . import quote_requests
from . import signup_popup
from . import sms

# Import every model so metadata is complete for create_all and Flask-Migrate.
from .user import User
from .product import Product
from .contact_submission import ContactSubmission
from .content import Content
from .hero_section import HeroSection
from .homepage_content import HomepageContent
from .menu import Menu
from .navbar import Navbar
from .product_selection import PopupProductSelection, SaleItemsSelection
from .product_request import ProductRequest
from .quote_request import QuoteRequest
from .signup_popup import SignupPopup
from .sms_log import SMSLog

__all__ = [
    "User",
    "Product",
    "ContactSubmission",
    "Content",
    "HeroSection",
    "HomepageContent",
    "Menu",
    "Navbar",
    "PopupProductSelection",
    "SaleItemsSelection",
    "ProductRequest",
    "QuoteRequest",
    "SignupPopup",
    "SMSLog",
]

"""Constants and configuration values for appstorehub."""

from typing import Any, List


def values_of(constants_class) -> List[Any]:
    """Return the public constant values declared on a constants class."""
    return [
        value for name, value in vars(constants_class).items()
        if name.isupper()
    ]


# Endpoint Constants
class Endpoints:
    """Upstream URLs used by the service."""

    LOOKUP_URL = "https://itunes.apple.com/lookup"
    LIST_URL = "http://ax.itunes.apple.com/WebObjects/MZStoreServices.woa/ws/RSS/{collection}/{category}limit={num}/json?s={store}"
    SEARCH_URL = "https://search.itunes.apple.com/WebObjects/MZStore.woa/wa/search?clientApplication=Software&media=software&term="
    SUGGEST_URL = "https://search.itunes.apple.com/WebObjects/MZSearchHints.woa/wa/hints?clientApplication=Software&term="
    REVIEWS_URL = "https://itunes.apple.com/{country}/rss/customerreviews/page={page}/id={id}/sortby={sort}/json"
    RATINGS_URL = "https://itunes.apple.com/{country}/customer-reviews/id{id}?displayable-kind=11"
    SIMILAR_URL = "https://itunes.apple.com/us/app/app/id"
    APP_PAGE_URL = "https://apps.apple.com/{country}/app/id{id}"
    STOREFRONT_ORIGIN = "https://apps.apple.com"
    CATALOG_API_URL = "https://amp-api-edge.apps.apple.com/v1/catalog/{country}/apps/{id}"


# Store-front header codes (second half of X-Apple-Store-Front)
class StoreFrontCodes:
    """Trailing content-type code per storefront-scoped endpoint."""

    RATINGS = "12"
    SEARCH = "24 t:native"
    SUGGEST = "29"
    SIMILAR = "32"


# Collection Constants
class Collection:
    """RSS feed collections accepted by the list endpoint."""

    TOP_MAC = "topmacapps"
    TOP_FREE_MAC = "topfreemacapps"
    TOP_GROSSING_MAC = "topgrossingmacapps"
    TOP_PAID_MAC = "toppaidmacapps"
    NEW_IOS = "newapplications"
    NEW_FREE_IOS = "newfreeapplications"
    NEW_PAID_IOS = "newpaidapplications"
    TOP_FREE_IOS = "topfreeapplications"
    TOP_FREE_IPAD = "topfreeipadapplications"
    TOP_GROSSING_IOS = "topgrossingapplications"
    TOP_GROSSING_IPAD = "topgrossingipadapplications"
    TOP_PAID_IOS = "toppaidapplications"
    TOP_PAID_IPAD = "toppaidipadapplications"


# Category Constants
class Category:
    """App Store genre ids."""

    BOOKS = 6018
    BUSINESS = 6000
    CATALOGS = 6022
    EDUCATION = 6017
    ENTERTAINMENT = 6016
    FINANCE = 6015
    FOOD_AND_DRINK = 6023
    GAMES = 6014
    GAMES_ACTION = 7001
    GAMES_ADVENTURE = 7002
    GAMES_ARCADE = 7003
    GAMES_BOARD = 7004
    GAMES_CARD = 7005
    GAMES_CASINO = 7006
    GAMES_DICE = 7007
    GAMES_EDUCATIONAL = 7008
    GAMES_FAMILY = 7009
    GAMES_MUSIC = 7011
    GAMES_PUZZLE = 7012
    GAMES_RACING = 7013
    GAMES_ROLE_PLAYING = 7014
    GAMES_SIMULATION = 7015
    GAMES_SPORTS = 7016
    GAMES_STRATEGY = 7017
    GAMES_TRIVIA = 7018
    GAMES_WORD = 7019
    HEALTH_AND_FITNESS = 6013
    LIFESTYLE = 6012
    MAGAZINES_AND_NEWSPAPERS = 6021
    MEDICAL = 6020
    MUSIC = 6011
    NAVIGATION = 6010
    NEWS = 6009
    PHOTO_AND_VIDEO = 6008
    PRODUCTIVITY = 6007
    REFERENCE = 6006
    SHOPPING = 6024
    SOCIAL_NETWORKING = 6005
    SPORTS = 6004
    TRAVEL = 6003
    UTILITIES = 6002
    WEATHER = 6001


class Device:
    """Device classes reported by the lookup endpoint."""

    IPAD = "iPadSoftware"
    MAC = "macSoftware"
    ALL = "software"


class Sort:
    """Review feed orderings."""

    RECENT = "mostRecent"
    HELPFUL = "mostHelpful"


# Request Limits
class LimitConstants:
    """Bounds enforced before a request is issued."""

    DEFAULT_LIST_NUM = 50
    MAX_LIST_NUM = 200
    DEFAULT_SEARCH_NUM = 50
    MIN_REVIEWS_PAGE = 1
    MAX_REVIEWS_PAGE = 10


# Document selectors for server-rendered pages
class Selectors:
    """CSS selectors used by the document scraper."""

    RATING_COUNT = ".rating-count"
    RATING_BARS = ".vote .total"

    PRIVACY_ARTICLE = "article.detail-view"
    PRIVACY_MARKER = "Data"
    PURPOSE_SECTION = "purpose-section"
    PURPOSE_CATEGORY = "purpose-category"
    CATEGORY_TITLE = ".category-title"
    MANAGE_CHOICES_LINK = "a.privacy-choices"

    VERSION_ARTICLE = "article.detail"
    VERSION_LABEL = ".metadata h4"
    RELEASE_DATE = "time[datetime]"

    HEADINGS = "h1, h2, h3, h4, h5, h6"


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


DEFAULT_STORE_ID = 143441

# Country code -> store front id
MARKETS = {
    "DZ": 143563, "AO": 143564, "AI": 143538, "AR": 143505, "AM": 143524,
    "AU": 143460, "AT": 143445, "AZ": 143568, "BH": 143559, "BD": 143490,
    "BB": 143541, "BY": 143565, "BE": 143446, "BZ": 143555, "BM": 143542,
    "BO": 143556, "BW": 143525, "BR": 143503, "BN": 143560, "BG": 143526,
    "CA": 143455, "KY": 143544, "CL": 143483, "CN": 143465, "CO": 143501,
    "CR": 143495, "HR": 143494, "CY": 143557, "CZ": 143489, "DK": 143458,
    "DM": 143545, "EC": 143509, "EG": 143516, "SV": 143506, "EE": 143518,
    "FI": 143447, "FR": 143442, "DE": 143443, "GB": 143444, "GH": 143573,
    "GR": 143448, "GD": 143546, "GT": 143504, "GY": 143553, "HN": 143510,
    "HK": 143463, "HU": 143482, "IS": 143558, "IN": 143467, "ID": 143476,
    "IE": 143449, "IL": 143491, "IT": 143450, "JM": 143511, "JP": 143462,
    "JO": 143528, "KE": 143529, "KR": 143466, "KW": 143493, "LV": 143519,
    "LB": 143497, "LT": 143520, "LU": 143451, "MO": 143515, "MK": 143530,
    "MG": 143531, "MY": 143473, "ML": 143532, "MT": 143521, "MU": 143533,
    "MX": 143468, "MS": 143547, "NP": 143484, "NL": 143452, "NZ": 143461,
    "NI": 143512, "NE": 143534, "NG": 143561, "NO": 143457, "OM": 143562,
    "PK": 143477, "PA": 143485, "PY": 143513, "PE": 143507, "PH": 143474,
    "PL": 143478, "PT": 143453, "QA": 143498, "RO": 143487, "RU": 143469,
    "SA": 143479, "SN": 143535, "RS": 143500, "SG": 143464, "SK": 143496,
    "SI": 143499, "ZA": 143472, "ES": 143454, "LK": 143486, "SR": 143554,
    "SE": 143456, "CH": 143459, "TW": 143470, "TZ": 143572, "TH": 143475,
    "TN": 143536, "TR": 143480, "UG": 143537, "UA": 143492, "AE": 143481,
    "US": 143441, "UY": 143514, "UZ": 143566, "VE": 143502, "VN": 143471,
    "YE": 143571,
}

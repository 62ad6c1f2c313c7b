"""Schema.org vocabulary and SEO constant values."""

SCHEMA_ORG_CONTEXT = "https://schema.org"

# Schema.org types
SCHEMA_TYPE_ORGANIZATION = "Organization"
SCHEMA_TYPE_WEBSITE = "WebSite"
SCHEMA_TYPE_WEBPAGE = "WebPage"
SCHEMA_TYPE_ARTICLE = "Article"
SCHEMA_TYPE_BLOG_POSTING = "BlogPosting"
SCHEMA_TYPE_NEWS_ARTICLE = "NewsArticle"
SCHEMA_TYPE_BREADCRUMB_LIST = "BreadcrumbList"
SCHEMA_TYPE_LIST_ITEM = "ListItem"
SCHEMA_TYPE_FAQ_PAGE = "FAQPage"
SCHEMA_TYPE_QUESTION = "Question"
SCHEMA_TYPE_ANSWER = "Answer"
SCHEMA_TYPE_PRODUCT = "Product"
SCHEMA_TYPE_BRAND = "Brand"
SCHEMA_TYPE_OFFER = "Offer"
SCHEMA_TYPE_AGGREGATE_RATING = "AggregateRating"
SCHEMA_TYPE_REVIEW = "Review"
SCHEMA_TYPE_RATING = "Rating"
SCHEMA_TYPE_THING = "Thing"
SCHEMA_TYPE_LOCAL_BUSINESS = "LocalBusiness"
SCHEMA_TYPE_POSTAL_ADDRESS = "PostalAddress"
SCHEMA_TYPE_GEO_COORDINATES = "GeoCoordinates"
SCHEMA_TYPE_OPENING_HOURS = "OpeningHoursSpecification"
SCHEMA_TYPE_CONTACT_POINT = "ContactPoint"
SCHEMA_TYPE_PERSON = "Person"
SCHEMA_TYPE_IMAGE_OBJECT = "ImageObject"
SCHEMA_TYPE_SEARCH_ACTION = "SearchAction"

ARTICLE_TYPES = (SCHEMA_TYPE_ARTICLE, SCHEMA_TYPE_BLOG_POSTING, SCHEMA_TYPE_NEWS_ARTICLE)

# SearchAction query-input contract; schema.org convention, must not change
SEARCH_INPUT_ENCODING = "required name=search_term_string"
SEARCH_TERM_PLACEHOLDER = "{search_term_string}"

# Product availability
ITEM_AVAILABILITY_IN_STOCK = "https://schema.org/InStock"
ITEM_AVAILABILITY_OUT_OF_STOCK = "https://schema.org/OutOfStock"
ITEM_AVAILABILITY_PREORDER = "https://schema.org/PreOrder"
ITEM_AVAILABILITY_BACKORDER = "https://schema.org/BackOrder"
ITEM_AVAILABILITY_DISCONTINUED = "https://schema.org/Discontinued"
ITEM_AVAILABILITY_SOLD_OUT = "https://schema.org/SoldOut"

# Item condition
ITEM_CONDITION_NEW = "https://schema.org/NewCondition"
ITEM_CONDITION_USED = "https://schema.org/UsedCondition"
ITEM_CONDITION_REFURBISHED = "https://schema.org/RefurbishedCondition"

# LocalBusiness subtypes
BUSINESS_TYPE_RESTAURANT = "Restaurant"
BUSINESS_TYPE_STORE = "Store"
BUSINESS_TYPE_HOTEL = "Hotel"
BUSINESS_TYPE_LEGAL_SERVICE = "LegalService"
BUSINESS_TYPE_PROFESSIONAL_SERVICE = "ProfessionalService"

# ContactPoint types
CONTACT_TYPE_CUSTOMER_SERVICE = "customer service"
CONTACT_TYPE_TECHNICAL_SUPPORT = "technical support"
CONTACT_TYPE_SALES = "sales"

# Opening hours days
DAY_MONDAY = "https://schema.org/Monday"
DAY_TUESDAY = "https://schema.org/Tuesday"
DAY_WEDNESDAY = "https://schema.org/Wednesday"
DAY_THURSDAY = "https://schema.org/Thursday"
DAY_FRIDAY = "https://schema.org/Friday"
DAY_SATURDAY = "https://schema.org/Saturday"
DAY_SUNDAY = "https://schema.org/Sunday"
WEEKDAYS = (DAY_MONDAY, DAY_TUESDAY, DAY_WEDNESDAY, DAY_THURSDAY, DAY_FRIDAY)

# Defaults
DEFAULT_IMAGE_WIDTH = 1200
DEFAULT_IMAGE_HEIGHT = 630
DEFAULT_LOCALE = "en-US"
DEFAULT_CURRENCY = "USD"

# Social
OG_TYPE_WEBSITE = "website"
OG_TYPE_ARTICLE = "article"
TWITTER_CARD_SUMMARY = "summary"
TWITTER_CARD_SUMMARY_LARGE_IMAGE = "summary_large_image"

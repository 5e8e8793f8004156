
# Constants for catalog browsing and recommendation buckets.
ALL_CATEGORY = "All"  # pseudo-category that short-circuits to the whole catalog

# Classifier sentinels
UNCLASSIFIED = "Other"            # no keyword matched at all
OTHER_CLOTHING = "Other Clothing"  # apparel, but no specific type matched

# Sale marker carried by the "discount" field
DISCOUNT_MARKER = "Reduced price"

# Bucket thresholds
BUCKET_SIZE = 3
HIDDEN_GEMS_MIN_RATING = 4.5
HIDDEN_GEMS_MIN_REVIEWS = 100
TRENDING_MIN_REVIEWS = 50

# Flat list defaults
TOP_RATED_LIMIT = 10
BEST_SELLERS_LIMIT = 5
RELEVANT_LIMIT = 5

# Bucket names (as shown on recommendation surfaces)
BUCKET_HIDDEN_GEMS = "Hidden Gems"
BUCKET_VALUE_VAULT = "Value Vault"
BUCKET_TRENDING_NOW = "Trending Now"

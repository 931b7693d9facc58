from models.geo import GeoRecord, GeoAPIResponse
from models.cache import ServerIPCache

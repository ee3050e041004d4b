from switchlink.parsing.advertisement.decode import decode_advertisement
from switchlink.parsing.advertisement.model import AdvertisementSnapshot

__all__ = ["decode_advertisement", "AdvertisementSnapshot"]

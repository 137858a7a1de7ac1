# chamber_matching/config.py

# Room sizing defaults (assignees per room, host excluded)
TARGET_ASSIGNEES_DEFAULT = 3
ALLOW_OVERLAP_DEFAULT = False

# Placement scoring weights
SCORE_NO_CONFLICT = 500
SCORE_OVERLAP_PENALTY = 100
SCORE_SYNERGY = 200
SCORE_PER_OPEN_SEAT = 50
SCORE_PER_EXTRA_SEAT = 100

# Room ids
ROOM_ID_PREFIX = "room-"
LOBBY_ROOM_ID = "lobby"

# Placeholder host used when the lobby has nobody to lead it
LOBBY_HOST_ID = "lobby-host"
LOBBY_HOST_NAME = "Lobby"

# Defaults for malformed roster lines
UNNAMED_PREFIX = "unnamed"
DEFAULT_INDUSTRY = "general"

# Length of the hex digest used as a person id
PERSON_ID_LENGTH = 10

# Role keywords (substring match, lowercased). The localized keywords are the
# ones the chamber organisers type into their rosters.
HOST_KEYWORDS = ("host", "leader", "房長")
MEMBER_KEYWORDS = ("member", "會員")
GUEST_KEYWORDS = ("guest", "visitor", "來賓")

# Column headers recognised by the batch importer
NAME_HEADERS = ("name", "姓名")
INDUSTRY_HEADERS = ("industry", "產業")
ROLE_HEADERS = ("role", "身分", "身份")

# Built-in synergy table:
#   category | keywords | opportunities | target categories
DEFAULT_SYNERGY_TABLE = """\
Financial Services | accountant, lawyer, bookkeeper, land administration, bank, insurance | tax planning, asset protection, business loans | Corporate Services, Real Estate
Food & Wellness | restaurant, food wholesale, nutritionist, health supplements, cold chain, fitness | catering, corporate wellness, supply deals | Lifestyle
Media & Marketing | digital marketing, photography, graphic design, public relations, social media, influencer | brand campaigns, event coverage, content packages | Corporate Services, Beauty & Image, Lifestyle
Design & Build | interior design, cabinetry, plumbing, soft furnishing, carpentry, architect | renovation referrals, show-flat projects | Real Estate
Corporate Services | corporate training, software, legal counsel, labor relations, office furniture, human resources | employee programs, process automation | Financial Services, Media & Marketing
International Trade | import export, freight, customs broker, translation, cross-border e-commerce, overseas warehouse | export channels, logistics bundles | Financial Services, Corporate Services
Real Estate | realtor, land development, home inspection, cleaning, moving, feng shui | buyer referrals, move-in packages | Design & Build, Financial Services
Mind & Body | psychologist, aromatherapy, tarot, sound healing, yoga, meditation | workshops, retreat packages | Food & Wellness, Beauty & Image
Beauty & Image | beautician, bridal makeup, medical aesthetics, nail art, styling, apparel | bridal bundles, makeover events | Media & Marketing, Lifestyle
Lifestyle | tea trading, wine, travel, pet grooming, boutique retail, jewelry | gift sets, member perks | Food & Wellness, Beauty & Image
"""

"""
Pytest fixtures shared by the parser tests.
"""

import pytest

from ReleaseHub.utils.parser.grammar import build_parser

# Real-world release names used for property checks
RELEASE_NAMES = [
    "The Walking Dead S05E03 720p HDTV x264-ASAP[ettv]",
    "Hercules (2014) 1080p BrRip H264 - YIFY",
    "Dawn.of.the.Planet.of.the.Apes.2014.HDRip.XViD-EVO",
    "The Big Bang Theory S08E06 HDTV XviD-LOL [eztv]",
    "22 Jump Street (2014) 720p BrRip x264 - YIFY",
    "Hercules.2014.EXTENDED.1080p.WEB-DL.DD5.1.H264-RARBG",
    "Hercules.2014.Extended.Cut.HDRip.XViD-juggs[ETRG]",
    "WWE Hell in a Cell 2014 PPV WEB-DL x264-WD -={SPARROW}=-",
    "UFC.179.PPV.HDTV.x264-Ebi[rartv]",
    "Guardians Of The Galaxy 2014 R6 720p HDCAM x264-JYK",
    "Marvel's.Agents.of.S.H.I.E.L.D.S02E01.Shadows.1080p.WEB-DL.DD5.1",
    "Guardians of the Galaxy (CamRip / 2014)",
    "Brave.2012.R5.DVDRip.XViD.LiNE-UNiQUE",
    "Downton Abbey 5x06 HDTV x264-FoV [eztv]",
    "Lucy 2014 Dual-Audio WEBRip 1400Mb",
    "Two and a Half Men S12E01 HDTV x264 REPACK-LOL [eztv]",
    "Teenage.Mutant.Ninja.Turtles.2014.720p.HDRip.x264.AC3.5.1-RARBG",
    "Doctor.Who.2005.8x11.Dark.Water.720p.HDTV.x264-FoV[rartv]",
    "The Shaukeens 2014 Hindi (1CD) DvDScr x264 AAC...Hon3y",
    "doctor_who_2005.8x12.death_in_heaven.720p_hdtv_x264-fov",
    "Game of Thrones - 4x03 - Breaker of Chains",
    "[720pMkv.Com]_sons.of.anarchy.s05e10.480p.BluRay.x264-GAnGSteR",
    "[ www.Speed.cd ] -Sons.of.Anarchy.S07E07.720p.HDTV.X264-DIMENSION",
    "Community.s02e20.rus.eng.720p.Kybik.v.Kybe",
    "The.Jungle.Book.2016.3D.1080p.BRRip.SBS.x264.AAC-ETRG",
    "Ant-Man.2015.3D.1080p.BRRip.Half-SBS.x264.AAC-m2g",
    "The Purge: Election Year (2016) HC - 720p HDRiP - 900MB - ShAaNi",
    "The Hateful Eight (2015) 720p BluRay - x265 HEVC - 999MB - ShAaN",
    "The.Boss.2016.UNRATED.720p.BRRip.x264.AAC-ETRG",
    "The.Secret.Life.of.Pets.2016.HDRiP.AAC-LC.x264-LEGi0N",
    "[HorribleSubs] Clockwork Planet - 10 [480p].mkv",
    "[HorribleSubs] Detective Conan - 862 [1080p].mkv",
    "thomas.and.friends.s19e09_s20e14.convert.hdtv.x264-w4f[eztv].mkv",
    "Blade.Runner.2049.2017.1080p.WEB-DL.DD5.1.H264-FGT-[rarbg.to]",
    "2012 (2009) 1080p BrRip x264 - 1.7GB - YIFY",
    "Little.Girls.Love.Big.Ducks.11.[Crave.Media.2024].XXX.WEB-DL.540p.SPLIT.SCENES.[XC].Scene01",
    "www.1TamilMV.tf - Deadpool & Wolverine (2024) English TRUE WEB-DL - 4K SDR - HDR10+ - (DD+5.1 ATMOS - 768Kbps & AAC).mkv",
    "Delicious.2025.MVO.WEB-DLRip.NF.x264.p3rr3nt.mkv",
    "How to Lose a Guy in 10 Days [Как отделаться от парня за 10 дней] (2003) BDRip RusEngSubsChpt.mkv",
    "Этернавт - The Eternaut S01 E01 (Ночь игры в труко) WEB-DL 1080p (2025).mkv",
    "[designcode.io]",
    "",
]


@pytest.fixture(scope="session")
def grammar():
    """The full release-name grammar, built once like the application does."""
    return build_parser()


@pytest.fixture
def release_names():
    return list(RELEASE_NAMES)

"""Page objects for the AXIS6 application."""
from axis6_e2e.pages.analytics import AchievementsPage, AnalyticsPage
from axis6_e2e.pages.auth import LoginPage, RegisterPage
from axis6_e2e.pages.base import BasePage, testid
from axis6_e2e.pages.chat import ChatPage, NewChatRoomPage
from axis6_e2e.pages.dashboard import AXES, DashboardPage
from axis6_e2e.pages.landing import LandingPage
from axis6_e2e.pages.my_day import MyDayPage
from axis6_e2e.pages.profile import ProfilePage
from axis6_e2e.pages.settings import SECTION_TESTIDS, SettingsPage, SettingsSubPage

__all__ = [
    "AXES",
    "AchievementsPage",
    "AnalyticsPage",
    "BasePage",
    "ChatPage",
    "DashboardPage",
    "LandingPage",
    "LoginPage",
    "MyDayPage",
    "NewChatRoomPage",
    "ProfilePage",
    "RegisterPage",
    "SECTION_TESTIDS",
    "SettingsPage",
    "SettingsSubPage",
    "testid",
]
